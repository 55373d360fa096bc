from datetime import timedelta

from django.contrib import admin
from django.utils.html import format_html

from .calendar_data import DEFAULT_TABLE
from .models import NepaliCalendar

BADGE_HTML = (
    '<span style="background-color: {}; color: white; padding: 2px 8px; '
    'border-radius: 3px; font-size: 11px;">{}</span>'
)


@admin.register(NepaliCalendar)
class NepaliCalendarAdmin(admin.ModelAdmin):
    list_display = [
        'bs_month_label',
        'month_display',
        'days_in_month',
        'ad_start_date',
        'ad_end_date',
        'table_status',
    ]
    list_filter = ['bs_year', 'month']
    search_fields = ['bs_year']
    ordering = ['-bs_year', 'month']
    readonly_fields = ['ad_end_date', 'table_status']
    list_per_page = 50

    def bs_month_label(self, obj):
        return f"{obj.bs_year}/{obj.month:02d}"
    bs_month_label.short_description = 'BS Month'
    bs_month_label.admin_order_field = 'bs_year'

    def month_display(self, obj):
        return obj.get_month_display()
    month_display.short_description = 'Month'
    month_display.admin_order_field = 'month'

    def ad_end_date(self, obj):
        if not obj.ad_start_date:
            return None
        return obj.ad_start_date + timedelta(days=obj.days_in_month - 1)
    ad_end_date.short_description = 'AD End'

    def table_status(self, obj):
        """Flag rows that no longer agree with the built-in calendar table"""
        if not DEFAULT_TABLE.contains_year(obj.bs_year):
            return format_html('<span style="color: #6c757d;">{}</span>', 'Not in table')
        if DEFAULT_TABLE.days_in_month(obj.bs_year, obj.month) != obj.days_in_month:
            return format_html(BADGE_HTML, '#dc3545', 'MISMATCH')
        return format_html(BADGE_HTML, '#28a745', 'OK')
    table_status.short_description = 'Table'

    fieldsets = (
        ('Nepali Date', {
            'fields': ('bs_year', 'month', 'days_in_month', 'table_status')
        }),
        ('Gregorian Reference', {
            'fields': ('ad_start_date', 'ad_end_date')
        }),
    )
