"""
orders.models.capacity_gate

One row per capacity-limited order kind. Admission locks it before counting,
so concurrent inserts of a kind serialize even while the kind has no orders
yet (there is nothing else to lock in that case).
"""

from django.db import models


class CapacityGate(models.Model):
    kind = models.CharField(max_length=50, primary_key=True)

    class Meta:
        db_table = "capacity_gates"

    def __str__(self) -> str:
        return self.kind
