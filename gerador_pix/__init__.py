from gerador_pix.config import DEFAULT_PIX_CONFIG
from gerador_pix.crc import crc16, verificar_crc
from gerador_pix.emv import CampoEMV, codificar_campo, montar_grupo, decodificar_campos
from gerador_pix.error import (ErroPix, CampoEMVInvalido, ValorPixInvalido,
                               ChavePixInvalida, PayloadPixInvalido, ErroQrCode,
                               tratamento_erro_pix)
from gerador_pix.formatacao import formatar_moeda
from gerador_pix.gerador_qr_code import (SolicitacaoPix, gerar_payload_pix,
                                         gerar_qr_pix, gerar_txid)
from gerador_pix.qr_code import (gerar_imagem_qr, gerar_qr_code_png,
                                 gerar_qr_code_base64, gerar_qr_code_data_url)
from gerador_pix.validation import (TipoChavePix, validar_chave_pix,
                                    validar_payload_pix, normalizar_texto)
