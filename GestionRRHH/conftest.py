import pytest


def _usuario_con_rol(django_user_model, username, rol):
    from django.contrib.auth.models import Group

    user = django_user_model.objects.create_user(username=username, password='clave-segura-123')
    grupo, _ = Group.objects.get_or_create(name=rol)
    user.groups.add(grupo)
    return user


@pytest.fixture
def observador(django_user_model):
    return _usuario_con_rol(django_user_model, 'observador', 'viewer')


@pytest.fixture
def editor(django_user_model):
    return _usuario_con_rol(django_user_model, 'editor', 'user')


@pytest.fixture
def administrador(django_user_model):
    return _usuario_con_rol(django_user_model, 'administrador', 'admin')


@pytest.fixture
def client_observador(client, observador):
    client.force_login(observador)
    return client


@pytest.fixture
def client_editor(client, editor):
    client.force_login(editor)
    return client


@pytest.fixture
def client_admin(client, administrador):
    client.force_login(administrador)
    return client
