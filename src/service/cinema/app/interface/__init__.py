from src.service.cinema.app.interface.i_account_repo import IAccountRepo
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo


__all__ = ['IAccountRepo', 'ICatalogRepo']
