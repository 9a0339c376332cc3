from __future__ import annotations

from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone


class StaffProfile(models.Model):
    """Lockout bookkeeping for an admin (staff) user."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="staff_profile",
    )
    failed_login_attempts = models.PositiveIntegerField(default=0)
    locked_until = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    MAX_LOGIN_ATTEMPTS = 5
    LOCK_TIME = timedelta(minutes=15)

    class Meta:
        db_table = "staff_profiles"

    def __str__(self) -> str:
        return f"StaffProfile({self.user})"

    @classmethod
    def for_user(cls, user) -> "StaffProfile":
        profile, _ = cls.objects.get_or_create(user=user)
        return profile

    def is_locked(self) -> bool:
        return self.locked_until is not None and self.locked_until > timezone.now()

    def register_failure(self) -> bool:
        """Count a wrong password. Returns True when this attempt locked the account."""
        attempts = self.failed_login_attempts + 1
        locked = attempts >= self.MAX_LOGIN_ATTEMPTS
        if locked:
            self.locked_until = timezone.now() + self.LOCK_TIME
            self.failed_login_attempts = 0
        else:
            self.failed_login_attempts = attempts
        self.save(update_fields=["failed_login_attempts", "locked_until"])
        return locked

    def register_success(self) -> None:
        if self.failed_login_attempts or self.locked_until:
            self.failed_login_attempts = 0
            self.locked_until = None
            self.save(update_fields=["failed_login_attempts", "locked_until"])
