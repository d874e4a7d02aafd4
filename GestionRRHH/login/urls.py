from django.urls import path
from . import views

app_name = 'login'

urlpatterns = [
    path('', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),
    path('clave/', views.change_password, name='change_password'),
    path('usuarios/', views.UserListView.as_view(), name='user_list'),
    path('usuarios/crear/', views.register_view, name='register'),
    path('inicio/', views.home_redirect_view, name='go_home'),
]
