from django.contrib import admin

from .models import Account, Organization, SecurityKey


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "created_at"]
    search_fields = ["name", "slug"]
    readonly_fields = ["created_at"]
    ordering = ["name"]


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ["user", "organization", "role", "language", "created_at"]
    list_filter = ["role", "language", "organization"]
    search_fields = ["user__username", "user__email", "organization__name"]
    readonly_fields = ["created_at"]
    ordering = ["-created_at"]
    list_select_related = ["user", "organization"]


@admin.register(SecurityKey)
class SecurityKeyAdmin(admin.ModelAdmin):
    list_display = ["account", "updated_at"]
    readonly_fields = ["key", "updated_at"]
    list_select_related = ["account__user"]
