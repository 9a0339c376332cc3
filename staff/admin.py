from django.contrib import admin

from .models import StaffProfile


@admin.register(StaffProfile)
class StaffProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'failed_login_attempts', 'locked_until')
    search_fields = ('user__email', 'user__username')
