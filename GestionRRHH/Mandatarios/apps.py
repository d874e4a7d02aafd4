from django.apps import AppConfig


class MandatariosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'Mandatarios'
