"""Domain layer for rentledger application.

Services live in their own modules (``rentledger.domain.ledger`` and so on);
this package stays import-light because ``rentledger.utils`` depends on
``rentledger.domain.errors``.
"""
