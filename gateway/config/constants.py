"""
Gateway constants.

Fixed values shared by the authorization client and the services.
"""

# Authorization service paths
ISSUE_ACCESSKEYS_PATH = "/issue-accesskeys"
VERIFY_WITHDRAWAL_PATH = "/verify-withdrawal-request"

# Access key requests
ACCESSKEY_POF_TYPE = "test"
ACCESSKEY_DURATION_SECONDS = 600

# Withdrawals
WITHDRAWAL_ID_BYTES = 32
WITHDRAWAL_RECEIPT_PLACEHOLDER = "RECEIPT"
DEFAULT_PROCESSING_DELAY_SECONDS = 1.0

# HTTP status codes used in the error envelope
STATUS_BAD_REQUEST = 400
STATUS_INTERNAL_ERROR = 500
