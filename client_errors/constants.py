"""Constants shared by the redaction and client error layers."""

# Constant written in place of any redacted header or query parameter value
REDACTED_VALUE = "<REDACTED>"

# RFC 7807 structured error media type
PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_MIN = 100
HTTP_STATUS_MAX = 599
