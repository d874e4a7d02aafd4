from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('Personal', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='personal',
            name='institucion',
            field=models.CharField(blank=True, max_length=20, verbose_name='Institución'),
        ),
    ]
