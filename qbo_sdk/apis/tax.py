"""
QuickBooks Online sales tax APIs.
"""

from .mixins import CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi


class TaxAgencies(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'TaxAgency'


class TaxCodes(ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    """Tax codes are created through TaxService, not directly."""

    ENTITY = 'TaxCode'


class TaxRates(ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'TaxRate'


class TaxServices(CreateMixin, UpdateMixin, EntityApi):
    ENTITY = 'TaxService'
