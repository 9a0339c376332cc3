import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('order_number', models.CharField(max_length=100, unique=True)),
                ('customer_name', models.CharField(max_length=255)),
                ('customer_email', models.EmailField(db_index=True, max_length=255)),
                ('customer_phone', models.CharField(blank=True, max_length=50, null=True)),
                ('delivery_date', models.DateField(db_index=True)),
                ('order_kind', models.CharField(choices=[('regular', 'Dort / dezerty'), ('wedding_tasting', 'Svatební ochutnávka'), ('christmas_sweets', 'Vánoční cukroví'), ('christmas_tasting', 'Vánoční ochutnávka')], db_index=True, default='regular', max_length=50)),
                ('order_cake', models.BooleanField(default=False)),
                ('order_dessert', models.BooleanField(default=False)),
                ('cake_size', models.CharField(blank=True, max_length=100, null=True)),
                ('cake_flavor', models.CharField(blank=True, max_length=100, null=True)),
                ('cake_message', models.TextField(blank=True, null=True)),
                ('dessert_choice', models.CharField(blank=True, max_length=255, null=True)),
                ('tasting_cake_box_qty', models.PositiveIntegerField(blank=True, null=True)),
                ('tasting_sweetbar_box_qty', models.PositiveIntegerField(blank=True, null=True)),
                ('tasting_notes', models.TextField(blank=True, null=True)),
                ('sweets_items', models.JSONField(blank=True, help_text='Line items: sweet id, name, quantity (x100g), unit and line price.', null=True)),
                ('total_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('paid_at', models.DateTimeField(blank=True, null=True)),
                ('delivered_at', models.DateTimeField(blank=True, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='updated_orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ('-created_at',),
                'indexes': [
                    models.Index(fields=['order_kind', 'created_at'], name='orders_kind_created_idx'),
                    models.Index(fields=['customer_name'], name='orders_customer_name_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OrderPhoto',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('original_name', models.CharField(max_length=255)),
                ('mime_type', models.CharField(max_length=100)),
                ('file_size', models.PositiveIntegerField(help_text='Size in bytes.')),
                ('image_data', models.TextField(help_text='Base64 encoded image bytes.')),
                ('uploaded_at', models.DateTimeField(auto_now_add=True)),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='photos', to='orders.order')),
            ],
            options={
                'db_table': 'order_photos',
                'ordering': ('uploaded_at', 'id'),
            },
        ),
        migrations.CreateModel(
            name='BlockedDate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('created_by', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='blocked_dates', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'blocked_dates',
                'ordering': ('-date',),
            },
        ),
        migrations.CreateModel(
            name='CapacityGate',
            fields=[
                ('kind', models.CharField(max_length=50, primary_key=True, serialize=False)),
            ],
            options={
                'db_table': 'capacity_gates',
            },
        ),
        migrations.CreateModel(
            name='EmailLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('to_email', models.CharField(max_length=1000)),
                ('subject', models.CharField(max_length=255)),
                ('email_type', models.CharField(choices=[('admin_notification', 'Admin notification'), ('customer_confirmation', 'Customer confirmation'), ('test', 'Test')], db_index=True, max_length=30)),
                ('status', models.CharField(choices=[('sent', 'Sent'), ('failed', 'Failed'), ('queued', 'Queued')], db_index=True, default='queued', max_length=20)),
                ('error_message', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('sent_at', models.DateTimeField(blank=True, null=True)),
                ('order', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='email_logs', to='orders.order')),
            ],
            options={
                'db_table': 'email_log',
                'ordering': ['-created_at'],
            },
        ),
    ]
