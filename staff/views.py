from django.contrib.auth import get_user_model
from rest_framework import generics, serializers
from rest_framework.permissions import IsAdminUser


class AdminUserSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    failed_login_attempts = serializers.IntegerField(source='staff_profile.failed_login_attempts', default=0, read_only=True)
    locked_until = serializers.DateTimeField(source='staff_profile.locked_until', default=None, read_only=True)

    class Meta:
        model = get_user_model()
        fields = [
            'id',
            'email',
            'name',
            'is_active',
            'last_login',
            'date_joined',
            'failed_login_attempts',
            'locked_until',
        ]

    def get_name(self, obj):
        return obj.get_full_name() or obj.get_username()


class AdminUserListView(generics.ListAPIView):
    """GET /api/admin/users - staff accounts, newest first."""

    permission_classes = [IsAdminUser]
    serializer_class = AdminUserSerializer
    pagination_class = None

    def get_queryset(self):
        return (
            get_user_model().objects.filter(is_staff=True)
            .select_related('staff_profile')
            .order_by('-date_joined')
        )
