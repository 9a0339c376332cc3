from django.contrib import admin

from .models import BlockedDate, EmailLog, Order, OrderPhoto


class OrderPhotoInline(admin.TabularInline):
    model = OrderPhoto
    extra = 0
    fields = ('original_name', 'mime_type', 'file_size', 'uploaded_at')
    readonly_fields = fields
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('order_number', 'order_kind', 'customer_name', 'customer_email', 'delivery_date', 'status', 'created_at')
    list_filter = ('order_kind', 'delivery_date', 'created_at')
    search_fields = ('order_number', 'customer_name', 'customer_email')
    readonly_fields = ('order_number', 'created_at', 'updated_at', 'updated_by')
    inlines = [OrderPhotoInline]


@admin.register(BlockedDate)
class BlockedDateAdmin(admin.ModelAdmin):
    list_display = ('date', 'created_by', 'created_at')
    readonly_fields = ('created_at',)


@admin.register(EmailLog)
class EmailLogAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'email_type', 'to_email', 'status', 'order')
    list_filter = ('email_type', 'status')
    search_fields = ('to_email', 'subject', 'order__order_number')
    readonly_fields = ('created_at', 'sent_at', 'error_message')
