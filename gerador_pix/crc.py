from gerador_pix.config import MARCADOR_CRC
from gerador_pix.error import PayloadPixInvalido
import re
import crcmod


# CRC-16/CCITT-FALSE: sem reflexão e sem XOR final
_crc16_ccitt = crcmod.mkCrcFun(0x11021, initCrc=0xFFFF, rev=False, xorOut=0x0000)

_CRC_FINAL = re.compile(MARCADOR_CRC + r'[0-9A-Fa-f]{4}\Z')


def crc16(texto: str) -> str:
    try:
        dados = texto.encode('latin-1')
    except UnicodeEncodeError as erro:
        raise PayloadPixInvalido(
            f'Caractere fora do intervalo de 1 byte na posição {erro.start}'
        ) from erro

    return f"{_crc16_ccitt(dados):04X}"


def verificar_crc(payload: str) -> bool:
    '''
    Confere se os 4 últimos caracteres do payload são o CRC16
    calculado sobre todo o conteúdo anterior, incluindo o "6304".
    '''
    if not isinstance(payload, str) or not _CRC_FINAL.search(payload):
        return False

    corpo, informado = payload[:-4], payload[-4:]

    try:
        return crc16(corpo) == informado.upper()
    except PayloadPixInvalido:
        return False
