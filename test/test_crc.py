import random
import string
import pytest
from gerador_pix.crc import crc16, verificar_crc
from gerador_pix.error import PayloadPixInvalido


def test_crc16_valor_de_verificacao():
    assert crc16('123456789') == '29B1'


def test_crc16_texto_vazio_devolve_valor_inicial():
    assert crc16('') == 'FFFF'


def test_crc16_exemplo_bacen(payload_bcb):
    assert crc16(payload_bcb[:-4]) == '1D3D'


def test_crc16_deterministico():
    texto = '00020126330014BR.GOV.BCB.PIX0111529982247256304'
    assert len({crc16(texto) for _ in range(20)}) == 1


def test_crc16_formato_quatro_hex_maiusculo():
    for texto in ['a', '0', 'PIX', '6304', 'x' * 300]:
        crc = crc16(texto)
        assert len(crc) == 4
        assert all(c in '0123456789ABCDEF' for c in crc)


@pytest.mark.parametrize('semente', range(10))
def test_crc16_confere_com_algoritmo_bit_a_bit(semente, crc_referencia):
    gerador = random.Random(semente)
    alfabeto = string.ascii_letters + string.digits + ' .@-*/'
    for tamanho in (1, 7, 64, 250):
        texto = ''.join(gerador.choice(alfabeto) for _ in range(tamanho))
        assert crc16(texto) == crc_referencia(texto)


def test_crc16_caractere_latin1_usa_um_byte(crc_referencia):
    assert crc16('SÃO PAULO') == crc_referencia('SÃO PAULO')


def test_crc16_caractere_fora_de_um_byte():
    with pytest.raises(PayloadPixInvalido):
        crc16('PIX €')


def test_verificar_crc_payload_valido(payload_bcb):
    assert verificar_crc(payload_bcb) is True


def test_verificar_crc_aceita_hex_minusculo(payload_bcb):
    assert verificar_crc(payload_bcb[:-4] + payload_bcb[-4:].lower()) is True


def test_verificar_crc_payload_adulterado(payload_bcb):
    adulterado = payload_bcb.replace('Fulano', 'Fulana')
    assert verificar_crc(adulterado) is False


def test_verificar_crc_sem_marcador():
    assert verificar_crc('000201ABCD') is False
    assert verificar_crc('') is False
    assert verificar_crc(None) is False


def test_verificar_crc_quebra_de_linha_final(payload_bcb):
    assert verificar_crc(payload_bcb + '\n') is False
