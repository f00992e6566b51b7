# config.py
import json
import os

# --- Constants ---
# Fixed by the NAT-PMP and SSDP protocols, never read from settings.
NATPMP_PORT = 5351
SSDP_PORT = 1900
SSDP_MULTICAST_ADDR = "239.255.255.250"

SSDP_POLICIES = ("validated", "unconditional")

DEFAULT_SETTINGS = {
    "interface": "", "ssdp_policy": "validated", "igmp_table": "/proc/net/igmp"
}
SETTINGS_FILE = "netendpoints_settings.json"

# --- Global State ---
settings = {}


# --- Functions ---
def load_settings(path=SETTINGS_FILE):
    """Loads settings from JSON file, using defaults for missing keys."""
    if not os.path.exists(path):
        with open(path, 'w') as f:
            json.dump(DEFAULT_SETTINGS, f, indent=4)
        return DEFAULT_SETTINGS.copy()

    with open(path, 'r') as f:
        try:
            s = json.load(f)
        except json.JSONDecodeError:
            s = None

    if not isinstance(s, dict):
        print(f"ERROR: Could not read {path}. Using default settings.")
        return DEFAULT_SETTINGS.copy()

    for key, value in DEFAULT_SETTINGS.items():
        if key not in s:
            s[key] = value
        elif not isinstance(s[key], str):
            print(f"Warning: Setting '{key}' must be a string. Using '{value}'.")
            s[key] = value

    if s["ssdp_policy"] not in SSDP_POLICIES:
        print(f"Warning: Unknown ssdp_policy '{s['ssdp_policy']}'. Using '{DEFAULT_SETTINGS['ssdp_policy']}'.")
        s["ssdp_policy"] = DEFAULT_SETTINGS["ssdp_policy"]
    return s
