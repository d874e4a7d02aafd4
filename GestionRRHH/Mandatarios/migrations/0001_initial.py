from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('Personal', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Funcion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nombre', models.CharField(max_length=100, unique=True, verbose_name='Nombre')),
            ],
            options={
                'verbose_name': 'Función',
                'verbose_name_plural': 'Funciones',
                'db_table': 'funciones',
                'ordering': ['nombre'],
            },
        ),
        migrations.CreateModel(
            name='Mandatario',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('nombre', models.CharField(max_length=255, verbose_name='Nombre Completo')),
                ('pais', models.CharField(max_length=100, verbose_name='País')),
            ],
            options={
                'db_table': 'mandatarios',
                'ordering': ['nombre'],
            },
        ),
        migrations.CreateModel(
            name='EquipoRequerido',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('funcion', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='requerida_en', to='Mandatarios.funcion', verbose_name='Función')),
                ('mandatario', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='equipo_requerido', to='Mandatarios.mandatario')),
            ],
            options={
                'verbose_name': 'Función Requerida',
                'verbose_name_plural': 'Equipo Requerido',
                'db_table': 'equipo_requerido',
            },
        ),
        migrations.AddConstraint(
            model_name='equiporequerido',
            constraint=models.UniqueConstraint(fields=('mandatario', 'funcion'), name='equipo_requerido_unico'),
        ),
        migrations.CreateModel(
            name='Asignacion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('funcion', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='asignaciones', to='Mandatarios.funcion', verbose_name='Función')),
                ('mandatario', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='asignaciones', to='Mandatarios.mandatario', verbose_name='Mandatario')),
                ('personal', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='asignaciones', to='Personal.personal', verbose_name='Personal')),
            ],
            options={
                'verbose_name': 'Asignación',
                'verbose_name_plural': 'Asignaciones',
                'db_table': 'asignaciones',
            },
        ),
    ]
