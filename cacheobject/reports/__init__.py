# -*- coding: utf-8; -*-

from cacheobject.reports.html import html_report
from cacheobject.reports.text import text_report


formats = {
    'text': text_report,
    'html': html_report,
}
