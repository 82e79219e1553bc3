"""QRDesk Application Package: accounts, saved QR codes and donations.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
