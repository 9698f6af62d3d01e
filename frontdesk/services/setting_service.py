from flask import current_app

from frontdesk.extensions import db
from frontdesk.models import Setting


class SettingService:
    @staticmethod
    def get_setting(key, default=None):
        setting = db.session.get(Setting, key)
        if not setting:
            return default
        return setting.value

    @staticmethod
    def set_setting(key, value):
        setting = db.session.get(Setting, key)
        if setting:
            setting.value = str(value)
        else:
            setting = Setting(key=key, value=str(value))
            db.session.add(setting)
        db.session.commit()
        return setting

    @staticmethod
    def hotel_name():
        return SettingService.get_setting("hotel_name") or current_app.config.get("HOTEL_NAME", "")
