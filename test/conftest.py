import pytest
from decimal import Decimal
from gerador_pix.gerador_qr_code import SolicitacaoPix


def crc16_referencia(texto):
    crc = 0xFFFF
    for char in texto:
        crc ^= ord(char) << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return f"{crc:04X}"


@pytest.fixture
def crc_referencia():
    return crc16_referencia


@pytest.fixture
def solicitacao_paulo_cell():
    return SolicitacaoPix(
        chave_pix='teste@example.com',
        nome_recebedor='PAULO CELL',
        cidade_recebedor='VITORIA',
        valor=Decimal('10.50'),
        txid='ABC123'
    )


@pytest.fixture
def payload_bcb():
    return ('00020126580014br.gov.bcb.pix'
            '0136123e4567-e12b-12d1-a456-426655440000'
            '5204000053039865802BR5913Fulano de Tal6008BRASILIA'
            '62070503***63041D3D')


@pytest.fixture
def txid_fixo(monkeypatch):
    txid = 'TXIDFIXO0000000000000000A'
    monkeypatch.setattr('gerador_pix.gerador_qr_code.gerar_txid', lambda: txid)
    return txid
