# entityforms/core/errors.py

class DbException(Exception):
    """Falla de acceso a datos. Se muestra tal cual al usuario."""


class DbIntegrityException(DbException):
    """El registro sigue referenciado (p.ej. un departamento con vendedores)."""


class WiringError(RuntimeError):
    """Controlador usado sin sus colaboradores. Error de programación, no se captura."""
