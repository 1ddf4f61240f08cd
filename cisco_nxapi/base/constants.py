"""Constants to be used across the NX-API decoders."""

TIMEOUT = 30  # seconds

# Durations are kept in nanoseconds
NS_SECOND = 10 ** 9
NS_MINUTE = 60 * NS_SECOND
NS_HOUR = 60 * NS_MINUTE
NS_DAY = 24 * NS_HOUR
NS_WEEK = 7 * NS_DAY
NS_MONTH = 30 * NS_DAY  # device uptime, not calendar months

UINT64_MAX = 2 ** 64 - 1
UINT64_DIGITS = len(str(UINT64_MAX))

# Blanks trimmed around text values; U+00A0 and friends are not blanks here
ASCII_WHITESPACE = " \t\r\n\f\v"

# Years never show up in uptime-scale values; they are accepted and ignored
DURATION_UNIT_SCALE = {
    "year": 0,
    "month": NS_MONTH,
    "week": NS_WEEK,
    "day": NS_DAY,
    "hour": NS_HOUR,
    "minute": NS_MINUTE,
    "second": NS_SECOND,
}

# P[nY][nM][nW][nD][T[nH][nM][nS]]
ISO_DATE_UNITS = {"Y": "year", "M": "month", "W": "week", "D": "day"}
ISO_TIME_UNITS = {"H": "hour", "M": "minute", "S": "second"}

# 1w2d, 3h4m5s; upper case M is a month, lower case m a minute
COMPACT_UNITS = {
    "w": "week",
    "W": "week",
    "d": "day",
    "D": "day",
    "h": "hour",
    "H": "hour",
    "m": "minute",
    "M": "month",
    "s": "second",
    "S": "second",
}

TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M:%S"
TIMESTAMP_INPUT_FORMATS = (
    TIMESTAMP_FORMAT,
    "%m/%d/%Y",
    "%a %b %d %H:%M:%S %Y",  # reset time, ctime() style
)

NXAPI_SUCCESS_CODE = "200"

# NX-OS appends this to '| xml' output
XML_PIPE_TRAILER = r"]]>]]>"
