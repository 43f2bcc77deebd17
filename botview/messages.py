"""User-facing strings for the console and the HTML report.

Two catalogues are bundled: English (``en``) and Russian (``ru``).  Lookups
fall back to English for an unknown language or a missing key.
"""

from __future__ import annotations

from botview.config import settings

DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        # console
        "placeholder": "# Add the URLs to check here, one per line (e.g. https://example.com/)",
        "input_missing": "Input file {path} not found. A template has been created; add URLs and run again.",
        "input_invalid": "Input file {path} contains no http(s):// URLs. Add one URL per line and run again.",
        "dependency_missing": "Required package {package!r} is not installed. Install it with: pip install {package}",
        "checking": "Checking {url} as {bot}",
        "cached": "Using cached response for {bot}: {path}",
        "not_a_file": "Cache path exists but is not a file: {path}",
        "cache_error": "Cache file {path} is unusable: {error}",
        "attempt": "Attempt {attempt}/{total}: {url} as {bot}",
        "invalid_response": "Invalid response from {url} (HTTP {status})",
        "transport_error": "Request to {url} failed: {error}",
        "retrying": "Retrying in {delay:g}s …",
        "fetched": "Saved {bot} response to {path}",
        "fetch_failed": "Could not fetch {url} as {bot} after {total} attempts",
        "report_ready": "Report ready: {path}",
        "totals": "Checks: {total}  successful: {successful}  failed: {failed}",
        "rerun_hint": "{failed} check(s) failed. Run again: cached pages are skipped and only failed ones are retried.",
        # report
        "report_title": "SEO crawler check",
        "generated": "Generated",
        "total_checks": "Total checks",
        "successful_checks": "Successful",
        "failed_checks": "Failed",
        "col_url": "URL",
        "col_bot": "Bot",
        "col_canonical": "Canonical",
        "col_title": "Title",
        "col_description": "Description",
        "col_robots": "Robots",
        "col_reason": "Reason",
        "results_heading": "Results",
        "failures_heading": "Failed checks",
        "status_correct": "correct",
        "status_incorrect": "incorrect",
        "status_present": "present",
        "status_absent": "absent",
        "robots_not_found": "tag not found",
    },
    "ru": {
        "placeholder": "# Добавьте сюда URL для проверки, по одному на строку (например, https://example.com/)",
        "input_missing": "Файл {path} не найден. Создан шаблон: добавьте URL и запустите снова.",
        "input_invalid": "В файле {path} нет URL вида http(s)://. Добавьте по одному URL на строку и запустите снова.",
        "dependency_missing": "Не установлен пакет {package!r}. Установите его: pip install {package}",
        "checking": "Проверка {url} как {bot}",
        "cached": "Используется сохранённый ответ для {bot}: {path}",
        "not_a_file": "Путь кэша существует, но не является файлом: {path}",
        "cache_error": "Файл кэша {path} недоступен: {error}",
        "attempt": "Попытка {attempt}/{total}: {url} как {bot}",
        "invalid_response": "Некорректный ответ от {url} (HTTP {status})",
        "transport_error": "Ошибка запроса к {url}: {error}",
        "retrying": "Повтор через {delay:g} с …",
        "fetched": "Ответ {bot} сохранён в {path}",
        "fetch_failed": "Не удалось загрузить {url} как {bot} за {total} попыток",
        "report_ready": "Отчёт готов: {path}",
        "totals": "Проверок: {total}  успешно: {successful}  с ошибками: {failed}",
        "rerun_hint": "Ошибок: {failed}. Запустите снова: сохранённые страницы будут пропущены, повторятся только неудачные.",
        "report_title": "Проверка SEO глазами поисковых роботов",
        "generated": "Сформирован",
        "total_checks": "Всего проверок",
        "successful_checks": "Успешно",
        "failed_checks": "С ошибками",
        "col_url": "URL",
        "col_bot": "Робот",
        "col_canonical": "Canonical",
        "col_title": "Title",
        "col_description": "Description",
        "col_robots": "Robots",
        "col_reason": "Причина",
        "results_heading": "Результаты",
        "failures_heading": "Неудачные проверки",
        "status_correct": "верный",
        "status_incorrect": "неверный",
        "status_present": "есть",
        "status_absent": "нет",
        "robots_not_found": "тег не найден",
    },
}


def t(key: str, lang: str | None = None, **kwargs) -> str:
    """Return the message *key* in *lang* (default: ``settings.language``)."""
    catalogue = MESSAGES.get(lang or settings.language, MESSAGES[DEFAULT_LANGUAGE])
    template = catalogue.get(key) or MESSAGES[DEFAULT_LANGUAGE][key]
    return template.format(**kwargs) if kwargs else template


def print_notify(kind: str, message: str) -> None:
    """Default progress sink: ``[KIND] message`` on stdout."""
    print(f"[{kind.upper()}] {message}")
