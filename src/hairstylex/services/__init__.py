"""Service layer — the operations behind every CLI command.

Services take the :class:`~hairstylex.store.model.StoreModel` (and an
optional event bus) and return :class:`ServiceResult`.
"""
