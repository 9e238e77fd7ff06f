import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

COMMON_LAYER_PATH = "layers/common_layer"


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """requirements.txt をローカルの uv / pip でレイヤーに展開する Bundling

    どちらも使えない場合は False を返し、CDK が Docker でのバンドリングに切り替える。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        installers = {
            "uv": ["uv", "pip", "install", "-r", str(requirements_path)]
            + ["--target", str(target_dir), "--quiet"],
            "pip": ["pip", "install", "-r", str(requirements_path)]
            + ["-t", str(target_dir), "--quiet"],
        }
        for name, command in installers.items():
            if self._run(name, command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    @staticmethod
    def _run(name: str, command: list[str]) -> bool:
        """インストーラーを実行し、成功したかを返す"""
        logger.info("Trying local bundling with %s...", name)
        try:
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", name)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", name, e)
            return False
        logger.info("Local bundling with %s succeeded", name)
        return True


class Layers(Construct):
    """Lambda Layers Construct（Powertools・pydantic などの共通依存）"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                COMMON_LAYER_PATH,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_14.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(COMMON_LAYER_PATH),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_14],
            description="Booking service common dependencies",
        )
