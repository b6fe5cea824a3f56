from django.contrib import admin

from .models import Document


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ["title", "account", "access", "hit_count", "created_at"]
    list_filter = ["access", "created_at"]
    search_fields = ["title", "account__user__email"]
    readonly_fields = ["created_at"]
    list_select_related = ["account__user"]
