"""Known BizHawk releases, keyed by the SHA-1 of ``EmuHawk.exe``."""

from __future__ import annotations

KNOWN_VERSIONS: dict[str, str] = {
    "ef7c4067cec01b60b89ff8c271f3c72a0b2d009f": "2.9.1",
    "c9be7f8e4a05122e60545e8988920b710bd50ea7": "2.9",
    "31a2fadd049957377358a0b7b1267f3d8ecebfd9": "2.9-rc3",
    "a6ff6e02a05a0ec52695a7ec757aedcdc16e0192": "2.9-rc2",
    "288e310c430cbcbc0881913efd82e91f16dc14dd": "2.9-rc1",
    "88e476295d004a80ea514847c0d590879e7b3d88": "2.8",
    "9d2738265a37e28813eeff08e41def697f58cbee": "2.8-rc1",
    "eac6aa28589372d120e23e5b2f69b56c2542273b": "2.7",
    "7dd9dce90e16138ca38ef92cdb1270a378d21dad": "2.6.3",
    "3668613ed1fc61f1dafde9b678e6a637da23d882": "2.6.2",
    "115cb73156b4a288378fd00aa0fd982fb0c311c5": "2.6.1",
    "307526d8171fa9aa2dfbf735aa1eca23425b829a": "2.6",
    "7bcc6337005dba33fbc8a454cf7f669563f39e85": "2.5.2",
    "410c423feef9666955b2a0d66c3b64c3e432988a": "2.5.1",
    "d45a7348a8e5505b294df9add852787d04b569e4": "2.5.0",
    "6e169792aebef5942c9fabd276c7d3e07e2c3196": "2.4.2",
    "71d9bd1ae6d60b6fc7d3aebe474eae50995c29d7": "2.4.1",
    "2668ef81bad2459a9a14a09a3a8d5ee2c6e9cbac": "2.4",
    "1fbf1b672ddb4e98aef77a8edd5655149b4b4c72": "2.3.3",
    "d9365fd6f1f979a52689979e5709b26dfef7dc09": "2.3.2",
    "c2f4b95b86a11c472f7e8522598be644e9e05c6d": "2.3.1",
    "b2072e0bdf4944d060c83f44df17e88da4007c81": "2.3",
    "4c1599c7ed7e5216477454ac7fac0719f2ee6e66": "2.2.2",
    "6095cb07bd79703527c01ad4f27ed4e907d2f030": "2.2.1",
    "4e2ec35bff8798494d3cc0e22276f2456939257d": "2.2",
    "fc372a78d03ca5229f3c125a9dff91a779a66b7a": "2.1.1",
    "c2e31867428e03ba2ef23911d605163a7008d6a5": "2.1.0",
    "ab83cfd3ed5b9dc392d2b0d4aa1b99723c5bf4c9": "1.13.2",
    "3261214b9991918c5224d27b6cf7d84f9acd3566": "1.9.2",
    "202a0d945cd20a1b2e5021d3499ac7b5c2f5ca46": "1.6.1",
}

# Launched through the pre-2.9 bootstrap script on non-Windows hosts.
LEGACY_VERSIONS: frozenset[str] = frozenset({
    "2.8", "2.8-rc1", "2.7", "2.6.3", "2.6.2", "2.6.1", "2.6",
})

# No bootstrap script can drive these builds outside Windows.
UNSUPPORTED_VERSIONS: frozenset[str] = frozenset({
    "2.5.2", "2.5.1", "2.5.0", "2.4.2", "2.4.1", "2.4",
    "2.3.3", "2.3.2", "2.3.1", "2.3",
    "2.2.2", "2.2.1", "2.2",
    "2.1.1", "2.1.0",
    "1.13.2", "1.9.2", "1.6.1",
})
