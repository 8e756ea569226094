from decimal import Decimal
from enum import Enum
from gerador_pix.config import GUI_PIX, FORMATO_PAYLOAD
from gerador_pix.crc import verificar_crc
from gerador_pix.emv import campos_por_tag, codificar_campo
from gerador_pix.error import ErroPix, PayloadPixInvalido, tratamento_erro_pix
from gerador_pix.log import configurar_logging
import re
import unicodedata
import logging


configurar_logging()
logger = logging.getLogger(__name__)


class TipoChavePix(Enum):
    CPF = 'cpf'
    CNPJ = 'cnpj'
    EMAIL = 'email'
    TELEFONE = 'phone'
    ALEATORIA = 'random'


APELIDOS_TIPO = {
    'telefone': TipoChavePix.TELEFONE,
    'aleatoria': TipoChavePix.ALEATORIA
}


REGRAS_CHAVE = {
    TipoChavePix.CPF: lambda c: re.fullmatch(r'[0-9]{11}', so_digitos(c)),
    TipoChavePix.CNPJ: lambda c: re.fullmatch(r'[0-9]{14}', so_digitos(c)),
    TipoChavePix.EMAIL: lambda c: re.fullmatch(r'[^\s@]+@[^\s@]+\.[^\s@]+', c),
    TipoChavePix.TELEFONE: lambda c: re.fullmatch(r'55[0-9]{10,11}', so_digitos(c)),
    TipoChavePix.ALEATORIA: lambda c: re.fullmatch(
        r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}',
        c, re.IGNORECASE)
}


CAMPOS_OBRIGATORIOS = ['00', '26', '52', '53', '58', '59', '60', '63']


def so_digitos(texto: str) -> str:
    return re.sub(r'[^0-9]', '', texto)


def normalizar_texto(texto) -> str:
    '''
    Translitera o texto para ASCII: remove acentos, descarta o que
    não tiver equivalente e junta espaços repetidos.
    '''
    if texto is None:
        return ''

    decomposto = unicodedata.normalize('NFKD', str(texto))
    sem_acento = ''.join(
        c for c in decomposto if unicodedata.category(c) != 'Mn'
    )
    ascii_ = sem_acento.encode('ascii', 'ignore').decode('ascii')
    ascii_ = re.sub(r'[^\S ]+', ' ', ascii_)
    ascii_ = re.sub(r'[\x00-\x1f\x7f]', '', ascii_)
    ascii_ = re.sub(r' +', ' ', ascii_)

    return ascii_.strip()


def _tipo_chave(tipo):
    if isinstance(tipo, TipoChavePix):
        return tipo

    if not isinstance(tipo, str):
        return None

    tipo = tipo.strip().lower()
    if tipo in APELIDOS_TIPO:
        return APELIDOS_TIPO[tipo]

    try:
        return TipoChavePix(tipo)
    except ValueError:
        return None


def validar_chave_pix(chave: str, tipo) -> bool:
    if not isinstance(chave, str):
        logger.warning('Chave PIX deve ser texto.')
        return False

    tipo_chave = _tipo_chave(tipo)
    if tipo_chave is None:
        logger.warning(f'Tipo de chave PIX desconhecido: {tipo}')
        return False

    return REGRAS_CHAVE[tipo_chave](chave) is not None


def validar_payload_pix(payload: str) -> dict:
    try:
        if not payload or not isinstance(payload, str):
            raise PayloadPixInvalido('Código PIX vazio ou inválido')

        if not payload.startswith(codificar_campo('00', FORMATO_PAYLOAD)):
            raise PayloadPixInvalido("Código PIX deve começar com '000201'")

        if not verificar_crc(payload):
            raise PayloadPixInvalido('CRC16 não confere com o conteúdo')

        campos = campos_por_tag(payload)

        faltando = [tag for tag in CAMPOS_OBRIGATORIOS if tag not in campos]
        if faltando:
            raise PayloadPixInvalido(
                f"Campos obrigatórios ausentes: {', '.join(faltando)}")

        conta = campos_por_tag(campos['26'])
        if conta.get('00', '').upper() != GUI_PIX:
            raise PayloadPixInvalido('Identificador BR.GOV.BCB.PIX ausente')

        if '01' not in conta:
            raise PayloadPixInvalido('Chave PIX ausente no campo 26')

        valor = None
        if '54' in campos:
            if not re.fullmatch(r'[0-9]+\.[0-9]{2}', campos['54']):
                raise PayloadPixInvalido(
                    f"Valor fora do formato 0.00 no campo 54: {campos['54']!r}")

            valor = Decimal(campos['54'])
            if valor <= 0:
                raise PayloadPixInvalido(
                    f"Valor zerado no campo 54: {campos['54']!r}")

        adicionais = campos_por_tag(campos['62']) if '62' in campos else {}

        logger.info('Payload PIX validado com sucesso.')
        return {
            'valido': True,
            'chave_pix': conta['01'],
            'descricao': conta.get('02'),
            'nome_recebedor': campos['59'],
            'cidade_recebedor': campos['60'],
            'valor': valor,
            'txid': adicionais.get('05'),
            'campos': list(campos)
        }

    except ErroPix as erro:
        resposta = tratamento_erro_pix(erro)
        return {'valido': False, 'erro': resposta['detalhe']}
