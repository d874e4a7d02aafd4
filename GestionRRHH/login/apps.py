from django.apps import AppConfig


class LoginConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'login'

    def ready(self):
        """
        Importa las señales cuando la aplicación está lista,
        garantizando que queden registradas.
        """
        import login.signals
