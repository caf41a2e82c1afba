"""Common mock API responses: errors, base URLs."""

BASE_URL = "https://dummy.local"

ERROR_SINGLE = b"<errors><error>Order not found</error></errors>"

ERROR_MULTIPLE = (
    b"<errors><error>Order not found</error>"
    b"<error>Also this is an error</error></errors>"
)

ERROR_NESTED = (
    b"<response><errors><error>Line 1: unknown product</error></errors>"
    b"<details><error>Line 2: <b>quantity</b> missing</error></details></response>"
)

ERROR_NONE = b"<errors></errors>"

ERROR_BLANK = b"<errors><error/><error>  </error></errors>"

ERROR_NOT_XML = b"Internal Server Error"
