from django.contrib import admin
from .models import Pos


@admin.register(Pos)
class PosAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'campus', 'city', 'postal_code', 'created_at', 'updated_at']
    list_filter = ['type', 'campus', 'city']
    search_fields = ['name', 'description', 'street', 'city']
    readonly_fields = ['created_at', 'updated_at', 'address']
    ordering = ['id']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'type', 'campus')
        }),
        ('Address', {
            'fields': ('street', 'house_number', 'postal_code', 'city', 'address')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def address(self, obj):
        return obj.address
    address.short_description = 'Full Address'
