from dataclasses import dataclass
from typing import Optional


# إعدادات الموقع (الشعار فقط حالياً)
@dataclass
class SiteSettings:
    logo: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(logo=data.get('logo') or None)

    def to_dict(self):
        return {'logo': self.logo}
