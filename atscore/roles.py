from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

import yaml

from .schemas import RoleProfile, RoleWeights
from .settings import DEFAULT_ROLES_PATH, Settings

logger = logging.getLogger(__name__)

DEFAULT_ROLE_ID = 'general'


class RoleRegistry:
    """Caller-owned collection of role profiles (predefined plus session custom roles).

    Profiles are validated when they are built, so every profile the registry
    hands out already has a weight tuple summing to 1.
    """

    def __init__(self, profiles: Iterable[RoleProfile] = (), default_role: str = DEFAULT_ROLE_ID):
        self._profiles: Dict[str, RoleProfile] = {}
        for profile in profiles:
            self.add(profile)
        if default_role not in self._profiles:
            self.add(RoleProfile(id=default_role, title=default_role.replace('_', ' ').title()))
        self.default_role = default_role

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'RoleRegistry':
        roles = config.get('roles') or {}
        profiles = [cls.build_profile(role_id, data or {}) for role_id, data in roles.items()]
        return cls(profiles, default_role=config.get('default_role', DEFAULT_ROLE_ID))

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> 'RoleRegistry':
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}
        registry = cls.from_config(config)
        logger.info(f"Loaded {len(registry)} role profiles from {config_path}")
        return registry

    @classmethod
    def load_default(cls) -> 'RoleRegistry':
        return cls.from_yaml(DEFAULT_ROLES_PATH)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'RoleRegistry':
        return cls.from_yaml(settings.roles_path)

    @staticmethod
    def build_profile(role_id: str, data: Dict[str, Any]) -> RoleProfile:
        """Build a profile from a config entry, applying default weights and sections."""
        fields = {
            'id': role_id,
            'title': data.get('title', role_id.replace('_', ' ').title()),
            'keywords': data.get('keywords') or [],
            'weights': RoleWeights(**(data.get('weights') or {})),
        }
        if data.get('required_sections') is not None:
            fields['required_sections'] = data['required_sections']
        return RoleProfile(**fields)

    def add(self, profile: RoleProfile) -> RoleProfile:
        if profile.id in self._profiles:
            raise ValueError(f"Role profile '{profile.id}' already exists")
        self._profiles[profile.id] = profile
        return profile

    def add_custom(self, title: str, keywords: List[str], **kwargs) -> RoleProfile:
        """Register a session custom role; its id is derived from the title."""
        role_id = kwargs.pop('id', None) or 'custom_' + '_'.join(title.lower().split())
        return self.add(self.build_profile(role_id, {'title': title, 'keywords': keywords, **kwargs}))

    def get(self, role_id: str) -> RoleProfile:
        try:
            return self._profiles[role_id]
        except KeyError:
            logger.error(f"Unknown role profile: {role_id}")
            raise

    def default(self) -> RoleProfile:
        return self._profiles[self.default_role]

    def resolve(self, name: Optional[str]) -> RoleProfile:
        """Find a profile by id or title (case-insensitive), else the default profile."""
        if name:
            key = name.strip().lower()
            for profile in self._profiles.values():
                if key in (profile.id.lower(), profile.title.lower()):
                    return profile
            logger.info(f"No role profile named '{name}', using '{self.default_role}'")
        return self.default()

    def profiles(self) -> List[RoleProfile]:
        return list(self._profiles.values())

    def __contains__(self, role_id: object) -> bool:
        return role_id in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)
