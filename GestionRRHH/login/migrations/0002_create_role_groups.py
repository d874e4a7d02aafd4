from django.db import migrations

# Permisos por rol sobre los modelos de la aplicación
MODELOS = [
    ('Personal', 'personal'),
    ('Personal', 'grupo'),
    ('Mandatarios', 'mandatario'),
    ('Mandatarios', 'funcion'),
    ('Mandatarios', 'equiporequerido'),
    ('Mandatarios', 'asignacion'),
]

ACCIONES_POR_ROL = {
    'admin': ('add', 'change', 'delete', 'view'),
    'user': ('add', 'change', 'delete', 'view'),
    'viewer': ('view',),
}


def create_groups(apps, schema_editor):
    # En una base nueva los permisos aún no existen (se crean en post_migrate);
    # el grupo se crea igual y los permisos del admin se asignan los que haya.
    Group = apps.get_model('auth', 'Group')
    Permission = apps.get_model('auth', 'Permission')

    for rol, acciones in ACCIONES_POR_ROL.items():
        group, _ = Group.objects.get_or_create(name=rol)
        codenames = [f'{accion}_{modelo}' for _, modelo in MODELOS for accion in acciones]
        permisos = Permission.objects.filter(
            content_type__app_label__in={app for app, _ in MODELOS},
            codename__in=codenames,
        )
        group.permissions.set(permisos)


def remove_groups(apps, schema_editor):
    Group = apps.get_model('auth', 'Group')
    Group.objects.filter(name__in=list(ACCIONES_POR_ROL)).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('login', '0001_initial'),
        ('Mandatarios', '0001_initial'),
        ('contenttypes', '0002_remove_content_type_name'),
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.RunPython(create_groups, remove_groups),
    ]
