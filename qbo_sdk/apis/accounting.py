"""
QuickBooks Online chart of accounts, lists and journal APIs.
"""

from .mixins import CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi


class Accounts(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Account'


class Attachables(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    """Attachment metadata (notes and file references)."""

    ENTITY = 'Attachable'


class Budgets(QueryMixin, EntityApi):
    """Budgets are read-only through the API and only available via query."""

    ENTITY = 'Budget'


class Classes(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Class'


class Departments(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Department'


class Items(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Item'


class JournalEntries(CreateMixin, ReadMixin, UpdateMixin, DeleteMixin, QueryMixin, EntityApi):
    ENTITY = 'JournalEntry'


class Terms(CreateMixin, ReadMixin, UpdateMixin, QueryMixin, EntityApi):
    ENTITY = 'Term'
