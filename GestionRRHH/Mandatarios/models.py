from django.db import models
from Personal.models import Personal


class Funcion(models.Model):
    nombre = models.CharField(max_length=100, unique=True, verbose_name="Nombre")

    def __str__(self):
        return self.nombre

    class Meta:
        db_table = 'funciones'
        ordering = ['nombre']
        verbose_name = "Función"
        verbose_name_plural = "Funciones"


class Mandatario(models.Model):
    nombre = models.CharField(max_length=255, verbose_name="Nombre Completo")
    pais = models.CharField(max_length=100, verbose_name="País")

    def __str__(self):
        return f"{self.nombre} ({self.pais})"

    class Meta:
        db_table = 'mandatarios'
        ordering = ['nombre']


class EquipoRequerido(models.Model):
    mandatario = models.ForeignKey(Mandatario, on_delete=models.CASCADE, related_name='equipo_requerido')
    funcion = models.ForeignKey(Funcion, on_delete=models.CASCADE, related_name='requerida_en', verbose_name="Función")

    def __str__(self):
        return f"{self.mandatario.nombre} requiere {self.funcion.nombre}"

    class Meta:
        db_table = 'equipo_requerido'
        verbose_name = "Función Requerida"
        verbose_name_plural = "Equipo Requerido"
        constraints = [
            models.UniqueConstraint(fields=['mandatario', 'funcion'], name='equipo_requerido_unico'),
        ]


class Asignacion(models.Model):
    personal = models.ForeignKey(Personal, on_delete=models.CASCADE, related_name='asignaciones', verbose_name="Personal")
    funcion = models.ForeignKey(Funcion, on_delete=models.CASCADE, related_name='asignaciones', verbose_name="Función")
    # Una asignación sin mandatario no cuenta para ningún equipo.
    mandatario = models.ForeignKey(
        Mandatario,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='asignaciones',
        verbose_name="Mandatario"
    )

    def __str__(self):
        return f"{self.funcion.nombre}: {self.personal}"

    class Meta:
        db_table = 'asignaciones'
        verbose_name = "Asignación"
        verbose_name_plural = "Asignaciones"


class Recordatorio(models.Model):
    PRIORIDAD_CHOICES = [
        ('baja', 'Baja'),
        ('media', 'Media'),
        ('alta', 'Alta'),
    ]

    titulo = models.CharField(max_length=200, verbose_name="Título")
    descripcion = models.TextField(blank=True, verbose_name="Descripción")
    fecha = models.DateTimeField(verbose_name="Fecha y hora")
    prioridad = models.CharField(max_length=10, choices=PRIORIDAD_CHOICES, default='media', verbose_name="Prioridad")
    completado = models.BooleanField(default=False, verbose_name="Completado")
    creado_en = models.DateTimeField(auto_now_add=True)
    actualizado_en = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.titulo

    class Meta:
        db_table = 'recordatorios'
        ordering = ['fecha']
        verbose_name = "Recordatorio"
        verbose_name_plural = "Recordatorios"
