"""Watchlist models for user-specific stock tracking."""

from django.db import models
from django.conf import settings


DEFAULT_WATCHLIST_NAME = 'My Watchlist'


class Watchlist(models.Model):
    """A named list of stocks owned by a user.

    Each user has at most one default watchlist; it is created on first use.
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='watchlists'
    )
    name = models.CharField(max_length=100, default=DEFAULT_WATCHLIST_NAME)
    is_default = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'watchlists'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['user'],
                condition=models.Q(is_default=True),
                name='unique_default_watchlist_per_user',
            ),
        ]

    def __str__(self):
        return f"{self.user.email}: {self.name}"


class WatchlistItem(models.Model):
    """A stock on a watchlist with optional price levels and notes."""

    watchlist = models.ForeignKey(
        Watchlist,
        on_delete=models.CASCADE,
        related_name='items'
    )
    symbol = models.CharField(max_length=20)
    added_price = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    target_price = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    stop_loss = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    notes = models.TextField(blank=True, default='')
    category = models.CharField(max_length=50, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'watchlist_items'
        unique_together = ('watchlist', 'symbol')
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.watchlist_id}: {self.symbol}"

    def save(self, *args, **kwargs):
        self.symbol = self.symbol.upper()
        super().save(*args, **kwargs)
