import os


GUI_PIX = 'BR.GOV.BCB.PIX'
FORMATO_PAYLOAD = '01'
CATEGORIA_COMERCIANTE = '0000'
MOEDA_BRL = '986'
PAIS = 'BR'
MARCADOR_CRC = '6304'

TAMANHO_MAXIMO_CAMPO = 99
TAMANHO_MAXIMO_NOME = 25
TAMANHO_MAXIMO_CIDADE = 15
TAMANHO_TXID = 25


DEFAULT_PIX_CONFIG = {
    'merchant_name': 'PAULO CELL',
    'merchant_city': 'VITORIA',
    'pix_key': ''
}


LOG_DIR = os.getenv('GERADOR_PIX_LOG_DIR', 'logs')
LOG_LEVEL = os.getenv('GERADOR_PIX_LOG_LEVEL', 'INFO').upper()
LOG_ARQUIVO = 'gerador_pix.log'
LOG_MAX_BYTES = 2000000
LOG_BACKUPS = 5
