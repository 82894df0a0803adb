# backend/mechcare/core/errors.py

class MechCareError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(MechCareError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class StorageError(MechCareError):
    status_code = 500


class ValidationFailure(MechCareError):
    status_code = 400

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
