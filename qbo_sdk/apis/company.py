"""
QuickBooks Online company, preferences and staff APIs.
"""

from .mixins import CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi


class CompanyInfo(ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    """Company information. The entity ID is the realm ID."""

    ENTITY = 'CompanyInfo'


class Preferences(ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Preferences'


class Employees(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Employee'


class TimeActivities(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'TimeActivity'
