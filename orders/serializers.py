from dataclasses import asdict

from rest_framework import serializers

from .models import BlockedDate, Order, OrderPhoto


class OrderPhotoSerializer(serializers.ModelSerializer):
    """Metadata only; the image itself is served by /photo/<id>."""

    url = serializers.SerializerMethodField()

    class Meta:
        model = OrderPhoto
        fields = [
            'id',
            'original_name',
            'mime_type',
            'file_size',
            'uploaded_at',
            'url',
        ]

    def get_url(self, obj):
        return f"/photo/{obj.pk}"


class OrderSerializer(serializers.ModelSerializer):
    status = serializers.CharField(read_only=True)
    details = serializers.SerializerMethodField()
    photos = OrderPhotoSerializer(many=True, read_only=True)
    updated_by = serializers.SlugRelatedField(slug_field='email', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'order_number',
            'order_kind',
            'customer_name',
            'customer_email',
            'customer_phone',
            'delivery_date',
            'status',
            'details',
            'total_amount',
            'paid_at',
            'delivered_at',
            'notes',
            'photos',
            'updated_by',
            'created_at',
            'updated_at',
        ]

    def get_details(self, obj):
        return asdict(obj.details)


class BlockedDateSerializer(serializers.ModelSerializer):
    created_by = serializers.SerializerMethodField()

    class Meta:
        model = BlockedDate
        fields = [
            'id',
            'date',
            'created_by',
            'created_at',
        ]

    def get_created_by(self, obj):
        user = obj.created_by
        return {
            'id': user.pk,
            'email': user.email,
            'name': user.get_full_name() or user.username,
        }
