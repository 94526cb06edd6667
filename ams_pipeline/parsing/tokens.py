import re
from typing import Optional
from .errors import NumericFieldError

# plain decimals only: float() alone also takes "1_000", "nan" and "inf"
DECIMAL_TOKEN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")

def parse_decimal(field: str, token: str, line: str, block_index: Optional[int] = None) -> float:
    if not DECIMAL_TOKEN.match(token):
        raise NumericFieldError(field, token, block_index=block_index, line=line)
    return float(token)
