import pytest
from decimal import Decimal
from gerador_pix.error import ValorPixInvalido
from gerador_pix.formatacao import formatar_moeda


@pytest.mark.parametrize('valor, esperado', [
    (0, 'R$ 0,00'),
    (10.5, 'R$ 10,50'),
    (Decimal('1234.56'), 'R$ 1.234,56'),
    ('1234567.891', 'R$ 1.234.567,89'),
    (-10, '-R$ 10,00'),
    ('0.005', 'R$ 0,01'),
])
def test_formatar_moeda(valor, esperado):
    assert formatar_moeda(valor) == esperado


@pytest.mark.parametrize('valor', ['abc', None, 'NaN'])
def test_formatar_moeda_valor_invalido(valor):
    with pytest.raises(ValorPixInvalido):
        formatar_moeda(valor)
