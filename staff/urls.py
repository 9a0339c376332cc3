from django.urls import path

from . import views, views_auth

urlpatterns = [
    path("login", views_auth.admin_login, name="admin-login"),
    path("logout", views_auth.admin_logout, name="admin-logout"),
    path("users", views.AdminUserListView.as_view(), name="admin-users"),
]
