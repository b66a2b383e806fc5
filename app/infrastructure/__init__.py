"""Infrastructure modules for the AutomX site.

Centralized infrastructure components:
- i18n: Translation lookup, locale detection, path translation, date formatting
- services: Dependency injection services (SettingsDep, I18nServiceDep, RequestLocaleDep)
"""
