"""Constantes criptográficas e headers de autenticação da Onbo."""

AES_KEY_SIZES_ALLOWED = (16, 24, 32)  # 128/192/256 bits
IV_SIZE = 16  # 128 bits (bloco AES, modo CBC)

# Headers exigidos em toda chamada (e enviados pela Onbo nos webhooks)
HEADER_CLIENT_ID = "X_CLIENT_UUID"
HEADER_EPOCH = "EPOCH"
HEADER_SIGNATURE = "X_STILT_HMAC"
HEADER_CONTENT_MD5 = "Content-MD5"
HEADER_CLIENT_VERSION = "X-Onbo-Client-Ver"
