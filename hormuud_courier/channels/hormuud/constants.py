TOKEN_URL = "https://smsapi.hormuud.com/token"
SEND_URL = "https://smsapi.hormuud.com/api/SendSMS"

MAX_MSG_LENGTH = 160

# Provider tokens live 90 minutes; expire ours a little earlier
TOKEN_TTL_SECONDS = 5340

# mType and eType are required by the send API but carry no meaning for us.
# The provider expects -1 in both.
UNSET_TYPE = -1
