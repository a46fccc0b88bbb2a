"""Daily price snapshots of the stocks a user tracks."""

from django.db import models
from django.conf import settings


class StockSnapshot(models.Model):
    """Closing-style record of one stock for one user on one day.

    Rows are written once and never updated; the daily cron job skips any
    (user, symbol, snapshot_date) that already exists.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='stock_snapshots'
    )
    symbol = models.CharField(max_length=20, db_index=True)
    name = models.CharField(max_length=255, blank=True, default='')
    price = models.DecimalField(max_digits=14, decimal_places=2)
    change = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    change_percent = models.DecimalField(max_digits=8, decimal_places=2, default=0)
    volume = models.BigIntegerField(null=True, blank=True)
    market_cap = models.BigIntegerField(null=True, blank=True)
    pe_ratio = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    snapshot_date = models.DateField(db_index=True)
    snapshot_time = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'stock_snapshots'
        ordering = ['-snapshot_date', 'symbol']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'symbol', 'snapshot_date'],
                name='unique_snapshot_per_user_symbol_day',
            ),
        ]

    def __str__(self):
        return f"{self.symbol} @ {self.snapshot_date}: {self.price}"

    def to_dict(self):
        return {
            'symbol': self.symbol,
            'name': self.name,
            'price': float(self.price),
            'change': float(self.change),
            'change_percent': float(self.change_percent),
            'volume': self.volume,
            'market_cap': self.market_cap,
            'pe_ratio': float(self.pe_ratio) if self.pe_ratio is not None else None,
            'snapshot_date': self.snapshot_date.isoformat(),
            'snapshot_time': self.snapshot_time.isoformat(),
        }
