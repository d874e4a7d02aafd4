# GestionRRHH/Mandatarios/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import user_passes_test
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse, reverse_lazy
from django.views.decorators.http import require_POST
from django.views.generic import CreateView, DeleteView, DetailView, ListView, UpdateView

from login.permissions import (
    AdminRequiredMixin, EscrituraRequiredMixin, LecturaRequiredMixin,
    has_admin_access, has_escritura_access, has_lectura_access,
)
from Personal.models import Personal
from Personal.rangos import sort_by_rank
from Personal.reportes import COLUMNAS_PERSONAL, filas_personal, respuesta_excel
from .equipo import compute_team_status, estado_equipos
from .estadisticas import obtener_estadisticas
from .forms import AsignacionForm, EquipoRequeridoForm, MandatarioForm, RecordatorioForm
from .models import Asignacion, EquipoRequerido, Mandatario, Recordatorio

logger = logging.getLogger(__name__)

lectura_required = user_passes_test(has_lectura_access, login_url='login:login')
escritura_required = user_passes_test(has_escritura_access, login_url='login:login')
admin_required = user_passes_test(has_admin_access, login_url='login:login')


@lectura_required
def dashboard(request):
    context = {
        'titulo': 'Panel de Control',
        'estadisticas': obtener_estadisticas(),
    }
    # Los recordatorios pendientes solo se muestran a los administradores
    if has_admin_access(request.user):
        context['recordatorios'] = Recordatorio.objects.filter(completado=False).order_by('fecha')
    return render(request, 'Mandatarios/dashboard.html', context)


# --- Mandatarios ---

class MandatarioListView(LecturaRequiredMixin, ListView):
    model = Mandatario
    template_name = 'Mandatarios/mandatario_list.html'
    context_object_name = 'equipos'

    def get_queryset(self):
        queryset = super().get_queryset()
        q = self.request.GET.get('q')
        if q:
            queryset = queryset.filter(nombre__icontains=q)
        equipos = estado_equipos(queryset)
        if self.request.GET.get('incompletos'):
            equipos = [(m, estado) for m, estado in equipos if not estado.is_complete]
        return equipos

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = 'Mandatarios'
        context['search_query'] = self.request.GET.get('q', '')
        return context


class MandatarioDetailView(LecturaRequiredMixin, DetailView):
    model = Mandatario
    template_name = 'Mandatarios/mandatario_detail.html'
    context_object_name = 'mandatario'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        asignaciones = list(
            self.object.asignaciones.select_related('funcion', 'personal').order_by('funcion__nombre')
        )
        requeridos = list(self.object.equipo_requerido.select_related('funcion').order_by('funcion__nombre'))
        context['asignaciones'] = asignaciones
        context['requeridos'] = requeridos
        context['estado'] = compute_team_status(requeridos, asignaciones)
        context['form_requerido'] = EquipoRequeridoForm(mandatario=self.object)
        return context


class MandatarioCreateView(EscrituraRequiredMixin, CreateView):
    model = Mandatario
    form_class = MandatarioForm
    template_name = 'Mandatarios/mandatario_form.html'

    def get_success_url(self):
        return reverse('Mandatarios:mandatario_detail', args=[self.object.pk])

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = 'Agregar Mandatario'
        return context


class MandatarioUpdateView(EscrituraRequiredMixin, UpdateView):
    model = Mandatario
    form_class = MandatarioForm
    template_name = 'Mandatarios/mandatario_form.html'

    def get_success_url(self):
        return reverse('Mandatarios:mandatario_detail', args=[self.object.pk])

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = f'Editar Mandatario: {self.object.nombre}'
        return context


class MandatarioDeleteView(EscrituraRequiredMixin, DeleteView):
    model = Mandatario
    template_name = 'Mandatarios/mandatario_confirm_delete.html'
    success_url = reverse_lazy('Mandatarios:mandatario_list')


# --- Equipo requerido ---

@escritura_required
@require_POST
def agregar_requerido(request, pk):
    mandatario = get_object_or_404(Mandatario, pk=pk)
    form = EquipoRequeridoForm(request.POST, mandatario=mandatario)
    if form.is_valid():
        requerido = form.save()
        messages.success(request, f'Función "{requerido.funcion}" agregada al equipo requerido.')
    else:
        for errores in form.errors.values():
            for error in errores:
                messages.error(request, error)
    return redirect('Mandatarios:mandatario_detail', pk=mandatario.pk)


@escritura_required
@require_POST
def quitar_requerido(request, pk):
    requerido = get_object_or_404(EquipoRequerido, pk=pk)
    mandatario_pk = requerido.mandatario_id
    requerido.delete()
    messages.success(request, 'Función retirada del equipo requerido.')
    return redirect('Mandatarios:mandatario_detail', pk=mandatario_pk)


# --- Asignaciones ---

class AsignacionCreateView(EscrituraRequiredMixin, CreateView):
    model = Asignacion
    form_class = AsignacionForm
    template_name = 'Mandatarios/asignacion_form.html'

    def get_initial(self):
        initial = super().get_initial()
        if self.request.GET.get('mandatario'):
            initial['mandatario'] = self.request.GET['mandatario']
        if self.request.GET.get('funcion'):
            initial['funcion'] = self.request.GET['funcion']
        return initial

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Asignación {self.object.pk}: {self.object} para mandatario {self.object.mandatario_id}.")
        return response

    def get_success_url(self):
        if self.object.mandatario_id:
            return reverse('Mandatarios:mandatario_detail', args=[self.object.mandatario_id])
        return reverse('Mandatarios:mandatario_list')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = 'Nueva Asignación'
        return context


class AsignacionDeleteView(EscrituraRequiredMixin, DeleteView):
    model = Asignacion
    template_name = 'Mandatarios/asignacion_confirm_delete.html'

    def get_success_url(self):
        if self.object.mandatario_id:
            return reverse('Mandatarios:mandatario_detail', args=[self.object.mandatario_id])
        return reverse('Mandatarios:mandatario_list')


# --- Recordatorios ---

class RecordatorioListView(AdminRequiredMixin, ListView):
    model = Recordatorio
    template_name = 'Mandatarios/recordatorio_list.html'
    context_object_name = 'recordatorios'

    def get_queryset(self):
        queryset = super().get_queryset()
        if not self.request.GET.get('todos'):
            queryset = queryset.filter(completado=False)
        return queryset.order_by('fecha')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = 'Recordatorios'
        return context


class RecordatorioCreateView(AdminRequiredMixin, CreateView):
    model = Recordatorio
    form_class = RecordatorioForm
    template_name = 'Mandatarios/recordatorio_form.html'
    success_url = reverse_lazy('Mandatarios:recordatorio_list')

    def form_valid(self, form):
        messages.success(self.request, 'Recordatorio creado exitosamente.')
        return super().form_valid(form)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = 'Nuevo Recordatorio'
        return context


class RecordatorioUpdateView(AdminRequiredMixin, UpdateView):
    model = Recordatorio
    form_class = RecordatorioForm
    template_name = 'Mandatarios/recordatorio_form.html'
    success_url = reverse_lazy('Mandatarios:recordatorio_list')

    def form_valid(self, form):
        messages.success(self.request, 'Recordatorio actualizado.')
        return super().form_valid(form)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['titulo'] = f'Editar Recordatorio: {self.object.titulo}'
        return context


class RecordatorioDeleteView(AdminRequiredMixin, DeleteView):
    model = Recordatorio
    template_name = 'Mandatarios/recordatorio_confirm_delete.html'
    success_url = reverse_lazy('Mandatarios:recordatorio_list')


@admin_required
@require_POST
def completar_recordatorio(request, pk):
    recordatorio = get_object_or_404(Recordatorio, pk=pk)
    recordatorio.completado = True
    recordatorio.save(update_fields=['completado', 'actualizado_en'])
    logger.info(f"Recordatorio {recordatorio.pk} completado por '{request.user.username}'.")
    messages.success(request, f'Recordatorio "{recordatorio.titulo}" marcado como completado.')
    return redirect('Mandatarios:recordatorio_list')


# --- Reportes ---

@lectura_required
def reportes(request):
    return render(request, 'Mandatarios/reportes.html', {'titulo': 'Reportes'})


@lectura_required
def exportar_personal(request):
    personas = sort_by_rank(Personal.objects.all(), por_institucion=True)
    return respuesta_excel(filas_personal(personas), 'Personal', 'Personal.xlsx', columnas=list(COLUMNAS_PERSONAL))


@lectura_required
def exportar_asignaciones(request):
    asignaciones = Asignacion.objects.select_related('personal', 'funcion', 'mandatario')
    filas = [
        {
            'Mandatario': a.mandatario.nombre if a.mandatario else '',
            'País': a.mandatario.pais if a.mandatario else '',
            'Función': a.funcion.nombre,
            'Rango': a.personal.rango,
            'Apellidos': a.personal.apellidos,
            'Nombres': a.personal.nombres,
            'Institución': a.personal.institucion,
            'Cédula': a.personal.cedula,
        }
        for a in _ordenar_asignaciones(asignaciones)
    ]
    return respuesta_excel(filas, 'Asignaciones', 'Asignaciones.xlsx')


@lectura_required
def exportar_mandatarios(request):
    filas = [
        {
            'Mandatario': m.nombre,
            'País': m.pais,
            'Funciones Requeridas': estado.required_count,
            'Funciones Asignadas': estado.assigned_count,
            'Funciones Faltantes': ', '.join(r.funcion.nombre for r in estado.missing),
            'Estado': estado.estado,
        }
        for m, estado in estado_equipos()
    ]
    return respuesta_excel(filas, 'Mandatarios', 'Mandatarios.xlsx')


def _ordenar_asignaciones(asignaciones):
    # Agrupa por mandatario y dentro de cada uno sigue el orden jerárquico del personal
    asignaciones = list(asignaciones)
    orden = {p.pk: i for i, p in enumerate(sort_by_rank([a.personal for a in asignaciones], por_institucion=True))}
    return sorted(
        asignaciones,
        key=lambda a: (a.mandatario.nombre if a.mandatario else '', orden[a.personal.pk]),
    )
