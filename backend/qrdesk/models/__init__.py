"""ORM Models: SQLAlchemy declarative models for users and their QR codes.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from qrdesk.models.user import User  # noqa: F401
from qrdesk.models.qr_code import QRCode  # noqa: F401
