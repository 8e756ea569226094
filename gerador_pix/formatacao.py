from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from gerador_pix.error import ValorPixInvalido


def formatar_moeda(valor) -> str:
    '''
    Formata o valor em reais no padrão brasileiro: R$ 1.234,56
    '''
    try:
        valor = Decimal(str(valor))
        if not valor.is_finite():
            raise ValorPixInvalido(f'Valor não finito: {valor}')

        valor = valor.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    except InvalidOperation as erro:
        raise ValorPixInvalido(f'Valor não numérico: {valor!r}') from erro

    sinal = '-' if valor < 0 else ''
    texto = f"{abs(valor):,.2f}"
    texto = texto.replace(',', '_').replace('.', ',').replace('_', '.')

    return f"{sinal}R$ {texto}"
