"""CLI constants: flags, token counts and output text."""

SENDER_FLAG = "-c"
RECEIVER_FLAG = "-s"
HOST_FLAG = "-h"
PORT_FLAG = "-p"
TIME_FLAG = "-t"

SENDER_TOKEN_COUNT = 7
RECEIVER_TOKEN_COUNT = 3

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

SENT_LABEL = "sent"
RECEIVED_LABEL = "received"
ERROR_PREFIX = "Error: "

LOG_COMPONENTS = ("cli", "iperfer")
