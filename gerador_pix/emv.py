from typing import Iterable, List, NamedTuple, Optional, Tuple
from gerador_pix.config import TAMANHO_MAXIMO_CAMPO
from gerador_pix.error import CampoEMVInvalido, PayloadPixInvalido


class CampoEMV(NamedTuple):
    tag: str
    tamanho: int
    valor: str


def codificar_campo(tag: str, valor: str) -> str:
    '''
    Codifica um campo EMV no formato ID + tamanho (2 dígitos) + valor.
    '''
    if not (isinstance(tag, str) and len(tag) == 2 and tag.isascii()
            and tag.isdigit()):
        raise CampoEMVInvalido(f'Tag EMV deve ter 2 dígitos: {tag!r}')

    if len(valor) > TAMANHO_MAXIMO_CAMPO:
        raise CampoEMVInvalido(
            f'Campo {tag} com {len(valor)} caracteres '
            f'(máximo {TAMANHO_MAXIMO_CAMPO})')

    tamanho = f"{len(valor):02d}"
    return f"{tag}{tamanho}{valor}"


def montar_grupo(campos: Iterable[Tuple[str, Optional[str]]]) -> str:
    return ''.join(
        codificar_campo(tag, valor)
        for tag, valor in campos
        if valor is not None
    )


def decodificar_campos(payload: str) -> List[CampoEMV]:
    campos = []
    pos = 0

    while pos < len(payload):
        cabecalho = payload[pos:pos + 4]
        if len(cabecalho) < 4:
            raise PayloadPixInvalido(
                f'Cabeçalho de campo incompleto na posição {pos}')

        tag, tamanho = cabecalho[:2], cabecalho[2:]
        if not (tag.isascii() and tag.isdigit()
                and tamanho.isascii() and tamanho.isdigit()):
            raise PayloadPixInvalido(
                f'Tag ou tamanho não numérico na posição {pos}: {cabecalho!r}')

        tamanho = int(tamanho)
        inicio = pos + 4
        fim = inicio + tamanho
        if fim > len(payload):
            raise PayloadPixInvalido(
                f'Campo {tag} ultrapassa o fim do payload')

        campos.append(CampoEMV(tag, tamanho, payload[inicio:fim]))
        pos = fim

    return campos


def campos_por_tag(payload: str) -> dict:
    return {campo.tag: campo.valor for campo in decodificar_campos(payload)}
