from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.urls import reverse_lazy

ROL_ADMIN = 'admin'
ROL_USUARIO = 'user'
ROL_OBSERVADOR = 'viewer'

ROLES = {
    ROL_ADMIN: 'Administrador',
    ROL_USUARIO: 'Usuario',
    ROL_OBSERVADOR: 'Observador',
}


def _en_grupos(user, nombres):
    if not user.is_authenticated:
        return False
    return user.is_superuser or user.groups.filter(name__in=nombres).exists()


def has_lectura_access(user):
    """Cualquier rol de la aplicación puede consultar."""
    return _en_grupos(user, list(ROLES))


def has_escritura_access(user):
    """Solo 'admin' y 'user' pueden crear, editar o borrar."""
    return _en_grupos(user, [ROL_ADMIN, ROL_USUARIO])


def has_admin_access(user):
    return _en_grupos(user, [ROL_ADMIN])


def nombre_rol(user):
    if user.is_superuser:
        return ROLES[ROL_ADMIN]
    for rol, nombre in ROLES.items():
        if user.groups.filter(name=rol).exists():
            return nombre
    return 'Sin rol'


class LecturaRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    login_url = reverse_lazy('login:login')

    def test_func(self):
        return has_lectura_access(self.request.user)


class EscrituraRequiredMixin(LecturaRequiredMixin):
    def test_func(self):
        return has_escritura_access(self.request.user)


class AdminRequiredMixin(LecturaRequiredMixin):
    def test_func(self):
        return has_admin_access(self.request.user)
