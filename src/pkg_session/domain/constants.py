from enum import Enum

FISCAL_NUMBER_INTERNATIONAL_PREFIX = "TINIT-"

TOKEN_ALGORITHM = "RS256"

DEFAULT_SET_ERROR_MESSAGE = "Error setting key value pair on redis"


class ReplyStatus(str, Enum):
    OK = "OK"
