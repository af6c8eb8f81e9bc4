# Log event codes emitted by the lambda handlers
INVALID_REQUEST = 'INVALID_REQUEST'
INVALID_SHORTLINK = 'INVALID_SHORTLINK'
SHORTLINK_NOT_FOUND = 'SHORTLINK_NOT_FOUND'
SHORTLINK_CREATED = 'SHORTLINK_CREATED'
SHORTLINK_INFO_SUCCESS = 'SHORTLINK_INFO_SUCCESS'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
DATA_STORE_UNAVAILABLE = 'DATA_STORE_UNAVAILABLE'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
