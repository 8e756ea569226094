from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union
from gerador_pix.config import (GUI_PIX, FORMATO_PAYLOAD, CATEGORIA_COMERCIANTE,
                                MOEDA_BRL, PAIS, MARCADOR_CRC,
                                TAMANHO_MAXIMO_NOME, TAMANHO_MAXIMO_CIDADE,
                                TAMANHO_TXID)
from gerador_pix.crc import crc16
from gerador_pix.emv import montar_grupo
from gerador_pix.error import (ErroPix, ValorPixInvalido, ChavePixInvalida,
                               PayloadPixInvalido)
from gerador_pix.log import configurar_logging
from gerador_pix.validation import normalizar_texto
import random
import string
import logging


configurar_logging()
logger = logging.getLogger(__name__)


ALFABETO_TXID = string.ascii_letters + string.digits


@dataclass(frozen=True)
class SolicitacaoPix:
    chave_pix: str
    nome_recebedor: str
    cidade_recebedor: str
    valor: Union[Decimal, int, float, str] = Decimal('0')
    txid: Optional[str] = None
    descricao: Optional[str] = None


def gerar_txid(tamanho: int = TAMANHO_TXID) -> str:
    return ''.join(random.choices(ALFABETO_TXID, k=tamanho))


def formatar_valor(valor) -> Optional[str]:
    '''
    Converte o valor para o texto do campo 54 ("10.50").
    Devolve None para valor zero, que gera um PIX sem valor fixo.
    '''
    if isinstance(valor, bool):
        raise ValorPixInvalido(f'Valor não numérico: {valor!r}')

    try:
        valor = Decimal(str(valor))
        if not valor.is_finite():
            raise ValorPixInvalido(f'Valor não finito: {valor}')

        valor = valor.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    except InvalidOperation as erro:
        raise ValorPixInvalido(f'Valor não numérico: {valor!r}') from erro

    if valor < 0:
        raise ValorPixInvalido(f'Valor negativo: {valor}')

    if valor == 0:
        return None

    return f"{valor:.2f}"


def gerar_payload_pix(solicitacao: SolicitacaoPix) -> str:
    '''
    Gera payload PIX Cópia e Cola conforme padrão BACEN (EMV-Co)
    '''
    try:
        chave_pix = solicitacao.chave_pix
        if chave_pix is not None and not isinstance(chave_pix, str):
            raise ChavePixInvalida(
                f'Chave PIX deve ser texto: {type(chave_pix).__name__}')

        chave_pix = (chave_pix or '').strip()
        if not chave_pix:
            raise ChavePixInvalida('Chave PIX vazia')

        valor = formatar_valor(solicitacao.valor)

        nome = normalizar_texto(solicitacao.nome_recebedor)
        cidade = normalizar_texto(solicitacao.cidade_recebedor)
        descricao = normalizar_texto(solicitacao.descricao) or None

        txid = solicitacao.txid
        if txid is not None and not isinstance(txid, str):
            raise PayloadPixInvalido(
                f'txid deve ser texto: {type(txid).__name__}')

        if not txid or not txid.strip():
            txid = gerar_txid()
            logger.info(f'txid ausente, gerado {txid}.')

        payload = montar_grupo([
            ('00', FORMATO_PAYLOAD),
            ('26', montar_grupo([
                ('00', GUI_PIX),
                ('01', chave_pix),
                ('02', descricao)
            ])),
            ('52', CATEGORIA_COMERCIANTE),
            ('53', MOEDA_BRL),
            ('54', valor),
            ('58', PAIS),
            ('59', nome[:TAMANHO_MAXIMO_NOME]),
            ('60', cidade[:TAMANHO_MAXIMO_CIDADE]),
            ('62', montar_grupo([
                ('05', txid)
            ]))
        ])

        payload_crc = payload + MARCADOR_CRC
        if not payload_crc.isascii():
            raise PayloadPixInvalido(
                'Chave PIX ou txid com caracteres fora do ASCII')

        crc = crc16(payload_crc)

    except ErroPix as erro:
        logger.warning(f'Falha ao gerar payload PIX: {str(erro)}')
        raise

    logger.info(f'Payload PIX gerado com sucesso para txid={txid}.')
    return payload_crc + crc


def gerar_qr_pix(
        chave_pix: str,
        valor,
        txid: Optional[str] = None,
        nome: str = '',
        cidade: str = '',
        descricao: Optional[str] = None
) -> str:
    return gerar_payload_pix(SolicitacaoPix(
        chave_pix=chave_pix,
        nome_recebedor=nome,
        cidade_recebedor=cidade,
        valor=valor,
        txid=txid,
        descricao=descricao
    ))
