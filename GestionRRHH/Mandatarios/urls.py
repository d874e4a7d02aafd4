from django.urls import path
from . import views

app_name = 'Mandatarios'

urlpatterns = [
    path('', views.dashboard, name='dashboard'),

    path('mandatarios/', views.MandatarioListView.as_view(), name='mandatario_list'),
    path('mandatarios/agregar/', views.MandatarioCreateView.as_view(), name='mandatario_create'),
    path('mandatarios/<int:pk>/', views.MandatarioDetailView.as_view(), name='mandatario_detail'),
    path('mandatarios/<int:pk>/editar/', views.MandatarioUpdateView.as_view(), name='mandatario_update'),
    path('mandatarios/<int:pk>/eliminar/', views.MandatarioDeleteView.as_view(), name='mandatario_delete'),
    path('mandatarios/<int:pk>/requerido/', views.agregar_requerido, name='agregar_requerido'),
    path('requerido/<int:pk>/quitar/', views.quitar_requerido, name='quitar_requerido'),

    path('asignaciones/agregar/', views.AsignacionCreateView.as_view(), name='asignacion_create'),
    path('asignaciones/<int:pk>/eliminar/', views.AsignacionDeleteView.as_view(), name='asignacion_delete'),

    path('recordatorios/', views.RecordatorioListView.as_view(), name='recordatorio_list'),
    path('recordatorios/agregar/', views.RecordatorioCreateView.as_view(), name='recordatorio_create'),
    path('recordatorios/<int:pk>/editar/', views.RecordatorioUpdateView.as_view(), name='recordatorio_update'),
    path('recordatorios/<int:pk>/eliminar/', views.RecordatorioDeleteView.as_view(), name='recordatorio_delete'),
    path('recordatorios/<int:pk>/completar/', views.completar_recordatorio, name='recordatorio_completar'),

    path('reportes/', views.reportes, name='reportes'),
    path('reportes/personal/', views.exportar_personal, name='exportar_personal'),
    path('reportes/asignaciones/', views.exportar_asignaciones, name='exportar_asignaciones'),
    path('reportes/mandatarios/', views.exportar_mandatarios, name='exportar_mandatarios'),
]
