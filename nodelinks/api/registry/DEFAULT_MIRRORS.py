"""Catalog written on first run when repos.json does not exist."""

DEFAULT_MIRRORS: list[dict] = [
    {"name": "npmmirror (Taobao)", "value": "registry.npmmirror.com", "alias": ["npmmirror", "taobao"]},
    {"name": "npm official registry", "value": "registry.npmjs.org", "alias": ["npmjs", "official"]},
    {"name": "Tencent Cloud mirror", "value": "mirrors.cloud.tencent.com/npm/", "alias": ["tencent"]},
    {"name": "Huawei Cloud mirror", "value": "mirrors.huaweicloud.com/repository/npm/", "alias": ["huawei"]},
    {"name": "Custom address", "value": "", "alias": ["custom"]},
]
