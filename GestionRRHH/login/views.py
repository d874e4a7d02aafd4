# GestionRRHH/login/views.py

import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout, update_session_auth_hash
from django.contrib.auth.decorators import login_required, user_passes_test
from django.contrib.auth.forms import AuthenticationForm
from django.contrib.auth.models import User
from django.db.models import Q
from django.shortcuts import redirect, render
from django.views.generic import ListView

from .forms import CambiarClaveForm, CustomUserCreationForm
from .permissions import AdminRequiredMixin, has_admin_access, has_lectura_access, nombre_rol

logger = logging.getLogger(__name__)


def login_view(request):
    if request.user.is_authenticated:
        return redirect_home(request.user)

    if request.method == 'POST':
        form = AuthenticationForm(request, data=request.POST)
        if form.is_valid():
            user = authenticate(
                request,
                username=form.cleaned_data.get('username'),
                password=form.cleaned_data.get('password'),
            )
            if user is not None:
                login(request, user)
                return redirect_home(user)
        messages.error(request, "Usuario o contraseña inválidos.")

    form = AuthenticationForm()
    return render(request, 'login/login.html', {'form': form})


def redirect_home(user):
    """
    Los usuarios con algún rol van al panel; el staff sin rol al admin;
    el resto vuelve al login.
    """
    if has_lectura_access(user):
        return redirect('Mandatarios:dashboard')
    if user.is_staff:
        return redirect('/admin/')
    return redirect('login:login')


@login_required
def home_redirect_view(request):
    if not has_lectura_access(request.user):
        messages.warning(request, "Su usuario no tiene un rol asignado en la aplicación.")
    return redirect_home(request.user)


@login_required
def change_password(request):
    if request.method == 'POST':
        form = CambiarClaveForm(user=request.user, data=request.POST)
        if form.is_valid():
            user = form.save()
            update_session_auth_hash(request, user)
            logger.info(f"Usuario '{user.username}' cambió su contraseña.")
            messages.success(request, 'Su contraseña fue cambiada correctamente.')
            return redirect_home(user)
    else:
        form = CambiarClaveForm(user=request.user)
    return render(request, 'login/change_password.html', {'form': form, 'titulo': 'Cambiar Contraseña'})


def logout_view(request):
    logout(request)
    return redirect('login:login')


@user_passes_test(has_admin_access, login_url='login:login')
def register_view(request):
    if request.method == 'POST':
        form = CustomUserCreationForm(request.POST)
        if form.is_valid():
            user = form.save()
            logger.info(f"Usuario '{user.username}' creado por '{request.user.username}' con rol {form.cleaned_data['rol']}.")
            messages.success(request, f"Usuario '{user.username}' creado correctamente.")
            return redirect('login:user_list')
    else:
        form = CustomUserCreationForm()
    return render(request, 'login/register.html', {'form': form, 'titulo': 'Crear Nuevo Usuario'})


class UserListView(AdminRequiredMixin, ListView):
    model = User
    template_name = 'login/user_list.html'
    context_object_name = 'users'
    paginate_by = 20

    def get_queryset(self):
        queryset = super().get_queryset().prefetch_related('groups').order_by('username')
        query = self.request.GET.get('q')
        if query:
            queryset = queryset.filter(
                Q(username__icontains=query) | Q(first_name__icontains=query) |
                Q(last_name__icontains=query) | Q(email__icontains=query)
            )
        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = "Gestión de Usuarios"
        context['search_query'] = self.request.GET.get('q', '')
        context['roles'] = {u.pk: nombre_rol(u) for u in context['users']}
        return context


def custom_404_view(request, exception):
    if request.user.is_authenticated:
        return redirect_home(request.user)
    return redirect('login:login')
