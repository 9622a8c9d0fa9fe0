"""Domain layer for ledgerbook application.

Services are imported from their modules (e.g. ``ledgerbook.domain.ledger``)
rather than re-exported here, so that the database layer can import
entities without pulling services in.
"""
