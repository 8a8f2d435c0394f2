"""
Exceptions metier / Domain exceptions.

    RentalAppError (base)
    +-- ValidationError   champs manquants ou mal formes / missing or malformed fields (400)
    +-- NotFoundError     enregistrement introuvable / record not found (404)
    +-- StoreError        echec du stockage / storage failure (500)

Les ValidationError sont levees avant tout appel au stockage.
ValidationError is always raised before any storage call.
"""


class RentalAppError(Exception):
    """Erreur de base / Base error."""

    code: str = "RENTAL_APP_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(RentalAppError):
    """Champ requis manquant ou invalide / Missing or malformed required field."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class NotFoundError(RentalAppError):
    """Identifiant sans enregistrement / Identifier without a record."""

    code = "NOT_FOUND"

    def __init__(self, collection: str, record_id: int | str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} {record_id} not found")


class StoreError(RentalAppError):
    """Le stockage a echoue / The document store failed."""

    code = "STORE_ERROR"

    def __init__(self, operation: str, collection: str, detail: str = ""):
        self.operation = operation
        self.collection = collection
        message = f"{operation} on {collection} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
