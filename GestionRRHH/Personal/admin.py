from django.contrib import admin
from .models import Grupo, Personal


@admin.register(Grupo)
class GrupoAdmin(admin.ModelAdmin):
    search_fields = ('nombre',)


@admin.register(Personal)
class PersonalAdmin(admin.ModelAdmin):
    # Configuración de la vista del personal en el panel de admin.
    list_display = (
        'rango', 'apellidos', 'nombres', 'cedula', 'institucion',
        'genero', 'telefono', 'grupo', 'categoria'
    )
    search_fields = ('nombres', 'apellidos', 'cedula', 'rango')
    list_filter = ('institucion', 'genero', 'grupo', 'rango')
    ordering = ('apellidos', 'nombres')

    def categoria(self, obj):
        return obj.categoria_rango.value
    categoria.short_description = 'Categoría'
