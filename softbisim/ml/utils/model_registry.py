"""Registry for tuned Soft-Bisim weights."""

from pathlib import Path
from typing import Dict, Any, Optional, Tuple
import json
from datetime import datetime
import logging

from ...core.weights import Weights

logger = logging.getLogger(__name__)


def save_weights(weights: Weights, filepath: Path) -> Path:
    """Write weights as a JSON object of the nine coefficients."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(weights.to_dict(), f, indent=2)
    return filepath


def load_weights(filepath: Path) -> Weights:
    """
    Read weights written by ``save_weights``.

    Raises:
        FileNotFoundError: if the file does not exist
        InvalidWeightsError: if the coefficients are incomplete or invalid
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Weights file not found: {filepath}")
    with open(filepath, 'r', encoding='utf-8') as f:
        return Weights.from_dict(json.load(f))


class WeightsRegistry:
    """Registry for managing and versioning tuned weights."""

    def __init__(self, registry_dir: Path):
        """
        Initialize weights registry.

        Args:
            registry_dir: Directory to store weights and metadata
        """
        self.registry_dir = Path(registry_dir)
        self.registry_dir.mkdir(parents=True, exist_ok=True)
        self.metadata_file = self.registry_dir / "registry.json"
        self.metadata = self._load_metadata()

    def _load_metadata(self) -> Dict[str, Any]:
        if self.metadata_file.exists():
            with open(self.metadata_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        return {"weights": {}, "versions": {}}

    def _save_metadata(self):
        with open(self.metadata_file, 'w', encoding='utf-8') as f:
            json.dump(self.metadata, f, indent=2)

    def register_weights(
        self,
        weights: Weights,
        name: str,
        version: str,
        metrics: Optional[Dict[str, float]] = None,
        config: Optional[Dict[str, Any]] = None,
        tags: Optional[Dict[str, str]] = None,
    ) -> Path:
        """
        Register a tuned cost model.

        Args:
            weights: The tuned weights
            name: Name of the weight set (e.g., "soft_bisim")
            version: Version string (e.g., "v1.0.0")
            metrics: Fitness metrics from training
            config: Training configuration
            tags: Additional tags

        Returns:
            Path to the saved weights file
        """
        version_dir = self.registry_dir / name / version
        weights_path = save_weights(weights, version_dir / "weights.json")

        entry = {
            "name": name,
            "version": version,
            "registered_at": datetime.now().isoformat(),
            "metrics": metrics or {},
            "config": config or {},
            "tags": tags or {},
            "weights_path": str(weights_path),
        }

        with open(version_dir / "metadata.json", 'w', encoding='utf-8') as f:
            json.dump(entry, f, indent=2)

        self.metadata["weights"].setdefault(name, {})[version] = entry

        # Simple string comparison, same as version directory sorting
        latest = self.metadata["versions"].get(name)
        if latest is None or version > latest:
            self.metadata["versions"][name] = version

        self._save_metadata()

        logger.info(f"Registered weights {name} version {version}")
        return weights_path

    def load_weights(
        self,
        name: str,
        version: Optional[str] = None,
    ) -> Tuple[Weights, Dict[str, Any]]:
        """
        Load registered weights.

        Args:
            name: Name of the weight set
            version: Version to load (defaults to latest)

        Returns:
            Tuple of (weights, metadata)
        """
        if name not in self.metadata["weights"]:
            raise ValueError(f"Weights {name} not found in registry")

        if version is None:
            version = self.get_latest_version(name)

        if version not in self.metadata["weights"][name]:
            raise ValueError(f"Version {version} of weights {name} not found")

        entry = self.metadata["weights"][name][version]
        weights = load_weights(Path(entry["weights_path"]))

        logger.info(f"Loaded weights {name} version {version}")
        return weights, entry

    def get_latest_version(self, name: str) -> str:
        if name not in self.metadata["versions"]:
            raise ValueError(f"No versions found for weights {name}")
        return self.metadata["versions"][name]

    def list_weights(self) -> Dict[str, list]:
        """Map each registered weight set to its versions."""
        return {
            name: list(versions.keys())
            for name, versions in self.metadata["weights"].items()
        }

    def compare_versions(self, name: str, version1: str, version2: str) -> Dict[str, Any]:
        """
        Compare metrics between two versions.

        Returns:
            Comparison dictionary with per-metric v1, v2 and diff
        """
        metrics1 = self.metadata["weights"][name][version1].get("metrics", {})
        metrics2 = self.metadata["weights"][name][version2].get("metrics", {})

        comparison = {
            "name": name,
            "version1": version1,
            "version2": version2,
            "metrics_comparison": {},
        }

        for metric in set(metrics1) & set(metrics2):
            val1, val2 = metrics1[metric], metrics2[metric]
            if val1 is None or val2 is None:
                continue
            comparison["metrics_comparison"][metric] = {
                "v1": val1,
                "v2": val2,
                "diff": val2 - val1,
            }

        return comparison
