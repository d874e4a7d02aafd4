from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Grupo',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nombre', models.CharField(max_length=100, unique=True, verbose_name='Nombre')),
            ],
            options={
                'db_table': 'grupos',
                'ordering': ['nombre'],
            },
        ),
        migrations.CreateModel(
            name='Personal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nombres', models.CharField(max_length=150, verbose_name='Nombres')),
                ('apellidos', models.CharField(blank=True, max_length=150, verbose_name='Apellidos')),
                ('cedula', models.CharField(max_length=20, unique=True, verbose_name='Cédula')),
                ('rango', models.CharField(blank=True, max_length=50, verbose_name='Rango')),
                ('genero', models.CharField(blank=True, choices=[('Masculino', 'Masculino'), ('Femenino', 'Femenino')], max_length=20, verbose_name='Género')),
                ('nacionalidad', models.CharField(blank=True, max_length=80, verbose_name='Nacionalidad')),
                ('telefono', models.CharField(blank=True, max_length=30, verbose_name='Teléfono')),
                ('institucion', models.CharField(blank=True, choices=[('ERD', 'ERD'), ('ARD', 'ARD'), ('FARD', 'FARD'), ('PN', 'PN'), ('MIDE', 'MIDE'), ('MIREX', 'MIREX')], max_length=20, verbose_name='Institución')),
                ('grupo', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='miembros', to='Personal.grupo', verbose_name='Grupo')),
            ],
            options={
                'verbose_name': 'Personal',
                'verbose_name_plural': 'Personal',
                'db_table': 'personal',
            },
        ),
    ]
