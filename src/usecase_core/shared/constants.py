HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_SERVER_ERROR = 500

SUCCESS_STATUS_RANGE = range(200, 300)

NOT_FOUND_ERROR = "Not Found"
SERVER_ERROR = "Server Error"

ENV_PREFIX = "USECASE_CORE_"
