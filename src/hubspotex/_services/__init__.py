from .companies_service import CompaniesService
from .contacts_service import ContactsService

__all__ = [
    "CompaniesService",
    "ContactsService",
]
