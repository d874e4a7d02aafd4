from django.db import models

from .rangos import classify_rank, rank_order_key


class Grupo(models.Model):
    nombre = models.CharField(max_length=100, unique=True, verbose_name="Nombre")

    def __str__(self):
        return self.nombre

    class Meta:
        db_table = 'grupos'
        ordering = ['nombre']


class Personal(models.Model):
    GENERO_CHOICES = [
        ('Masculino', 'Masculino'),
        ('Femenino', 'Femenino'),
    ]

    nombres = models.CharField(max_length=150, verbose_name="Nombres")
    apellidos = models.CharField(max_length=150, blank=True, verbose_name="Apellidos")
    cedula = models.CharField(max_length=20, unique=True, verbose_name="Cédula")
    # Texto libre: los rangos desconocidos se aceptan y se ordenan al final.
    rango = models.CharField(max_length=50, blank=True, verbose_name="Rango")
    genero = models.CharField(max_length=20, blank=True, choices=GENERO_CHOICES, verbose_name="Género")
    nacionalidad = models.CharField(max_length=80, blank=True, verbose_name="Nacionalidad")
    telefono = models.CharField(max_length=30, blank=True, verbose_name="Teléfono")
    institucion = models.CharField(max_length=20, blank=True, verbose_name="Institución")
    grupo = models.ForeignKey(
        Grupo,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='miembros',
        verbose_name="Grupo"
    )

    @property
    def nombre_completo(self):
        return f"{self.nombres} {self.apellidos}".strip()

    @property
    def categoria_rango(self):
        return classify_rank(self.rango)

    @property
    def orden_rango(self):
        return rank_order_key(self.rango)

    def __str__(self):
        if self.rango:
            return f"{self.rango} {self.nombre_completo}"
        return self.nombre_completo

    class Meta:
        db_table = 'personal'
        verbose_name = "Personal"
        verbose_name_plural = "Personal"
