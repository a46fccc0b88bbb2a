"""Django admin configuration for the dashboard API."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, Watchlist, WatchlistItem, StockSnapshot


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Custom User admin configuration."""

    list_display = ('email', 'name', 'is_active', 'is_staff', 'created_at')
    list_filter = ('is_active', 'is_staff')
    search_fields = ('email', 'name')
    ordering = ('-created_at',)

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Personal info', {'fields': ('name',)}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'created_at')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2', 'name'),
        }),
    )

    readonly_fields = ('created_at', 'last_login')


class WatchlistItemInline(admin.TabularInline):
    model = WatchlistItem
    extra = 0
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Watchlist)
class WatchlistAdmin(admin.ModelAdmin):
    list_display = ('user', 'name', 'is_default', 'created_at')
    list_filter = ('is_default',)
    search_fields = ('user__email', 'name')
    inlines = [WatchlistItemInline]


@admin.register(StockSnapshot)
class StockSnapshotAdmin(admin.ModelAdmin):
    """Stock snapshot admin configuration."""

    list_display = ('symbol', 'user', 'price', 'change_percent', 'snapshot_date')
    list_filter = ('snapshot_date',)
    search_fields = ('symbol', 'user__email')
    ordering = ('-snapshot_date',)
    readonly_fields = ('created_at',)
