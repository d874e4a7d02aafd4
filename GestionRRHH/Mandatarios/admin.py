from django.contrib import admin
from .models import Asignacion, EquipoRequerido, Funcion, Mandatario, Recordatorio


class EquipoRequeridoInline(admin.TabularInline):
    model = EquipoRequerido
    extra = 1


class AsignacionInline(admin.TabularInline):
    model = Asignacion
    extra = 0
    autocomplete_fields = ['personal']


@admin.register(Funcion)
class FuncionAdmin(admin.ModelAdmin):
    search_fields = ('nombre',)


@admin.register(Mandatario)
class MandatarioAdmin(admin.ModelAdmin):
    list_display = ('nombre', 'pais')
    search_fields = ('nombre', 'pais')
    inlines = [EquipoRequeridoInline, AsignacionInline]


@admin.register(Asignacion)
class AsignacionAdmin(admin.ModelAdmin):
    list_display = ('mandatario', 'funcion', 'personal')
    list_filter = ('mandatario', 'funcion')
    search_fields = ('personal__nombres', 'personal__apellidos', 'personal__cedula')
    autocomplete_fields = ['personal']


@admin.register(Recordatorio)
class RecordatorioAdmin(admin.ModelAdmin):
    list_display = ('titulo', 'fecha', 'prioridad', 'completado')
    list_filter = ('prioridad', 'completado')
    search_fields = ('titulo', 'descripcion')
