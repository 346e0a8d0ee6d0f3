from .step_10_system_update import SystemUpdateStep
from .step_15_extension_manager import ExtensionManagerStep
from .step_18_flathub import FlathubStep
from .step_20_replace_browser import ReplaceBrowserStep
from .step_30_remove_snap_store import RemoveSnapStoreStep
from .step_40_ppa_apps import FSearchStep, PPAInstallStep, TimeshiftStep
from .step_50_clapper import ClapperStep
from .step_60_developer_tools import DeveloperToolsStep
from .step_70_office_suite import OfficeSuiteStep
from .step_80_disk_utilities import DiskUtilitiesStep
from .step_90_cleanup import CleanupStep

__all__ = [
    "SystemUpdateStep",
    "ExtensionManagerStep",
    "FlathubStep",
    "ReplaceBrowserStep",
    "RemoveSnapStoreStep",
    "PPAInstallStep",
    "TimeshiftStep",
    "FSearchStep",
    "ClapperStep",
    "DeveloperToolsStep",
    "OfficeSuiteStep",
    "DiskUtilitiesStep",
    "CleanupStep",
]
