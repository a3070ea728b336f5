from __future__ import annotations
import os
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict

DEFAULT_IPFS_GATEWAY = "https://ipfs.io/ipfs/"
IPFS_GATEWAY_ENV = "IPFS_GATEWAY"

@dataclass
class Config:
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str) -> "Config":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(data=data or {})

    @classmethod
    def default(cls) -> "Config":
        return cls(data={"variables": {"ipfs_gateway": DEFAULT_IPFS_GATEWAY}})

    def __getitem__(self, item):
        return self.data[item]

    def get(self, key, default=None):
        return self.data.get(key, default)

    @property
    def variables(self) -> Dict[str, Any]:
        return self.data.get("variables") or {}

    @property
    def ipfs_gateway(self) -> str:
        """variables.ipfs_gateway, then $IPFS_GATEWAY, then the public ipfs.io gateway."""
        gw = self.variables.get("ipfs_gateway")
        if gw is not None:
            return str(gw)
        return os.getenv(IPFS_GATEWAY_ENV) or DEFAULT_IPFS_GATEWAY
