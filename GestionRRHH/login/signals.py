# GestionRRHH/login/signals.py

from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
from django.dispatch import receiver
import logging

logger = logging.getLogger('django')


@receiver(user_logged_in)
def log_user_login(sender, request, user, **kwargs):
    ip = request.META.get('REMOTE_ADDR') if request else None
    logger.info(f"✅ LOGIN: Usuario '{user.username}' inició sesión. (IP: {ip})")


@receiver(user_logged_out)
def log_user_logout(sender, request, user, **kwargs):
    if user:
        logger.info(f"🚪 LOGOUT: Usuario '{user.username}' cerró sesión.")


@receiver(user_login_failed)
def log_user_login_failed(sender, credentials, request=None, **kwargs):
    ip = request.META.get('REMOTE_ADDR') if request else None
    username = credentials.get('username', 'desconocido')
    logger.warning(f"⚠️ LOGIN FALLIDO: Intento fallido para el usuario '{username}'. (IP: {ip})")
