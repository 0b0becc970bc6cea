"""Erreurs métier levées par les services.

Les routers ne les attrapent pas: main.py enregistre un handler qui les
convertit en réponse JSON {"detail": message}.
"""


class TodoSphereError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoSphereError):
    """Champ requis manquant ou vide"""
    status_code = 400


class NotFoundError(TodoSphereError):
    """La ressource n'existe pas"""
    status_code = 404


class ForbiddenError(TodoSphereError):
    """La ressource existe mais n'appartient pas au demandeur.

    Renvoyé en 401 (et pas 403) pour rester compatible avec les clients existants.
    """
    status_code = 401
