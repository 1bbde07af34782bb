import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"
LAYER_RUNTIME = _lambda.Runtime.PYTHON_3_14


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """Docker を使わずにレイヤーの依存ライブラリをインストールする

    uv, pip の順に試し、どちらも使えなければ Docker でのバンドリングに任せる。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """False を返すと CDK は Docker イメージでのバンドリングを行う"""
        del options  # unused
        requirements = Path(self.source_path) / "requirements.txt"
        if not requirements.exists():
            logger.warning("No requirements.txt in %s", self.source_path)
            return False

        site_packages = Path(output_dir) / "python"
        for command in self._installers(requirements, site_packages):
            if self._install(command):
                return True

        logger.warning("All local installers failed, using Docker bundling")
        return False

    @staticmethod
    def _installers(requirements: Path, site_packages: Path) -> list[list[str]]:
        req, target = str(requirements), str(site_packages)
        return [
            ["uv", "pip", "install", "-r", req, "--target", target, "--quiet"],
            ["pip", "install", "-r", req, "-t", target, "--quiet"],
        ]

    @staticmethod
    def _install(command: list[str]) -> bool:
        installer = command[0]
        logger.info("Bundling layer locally with %s", installer)
        try:
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s is not installed", installer)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s exited with %s", installer, e.returncode)
            return False
        return True


class Layers(Construct):
    """Lambda Layers Construct

    aws-lambda-powertools と pydantic を共通レイヤーにまとめる。
    boto3 はランタイム同梱のものを使う。
    """

    def __init__(
        self, scope: Construct, id: str, source_path: str = LAYER_SOURCE_PATH
    ) -> None:
        super().__init__(scope, id)

        docker_command = "pip install -r requirements.txt -t /asset-output/python"
        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                source_path,
                bundling=BundlingOptions(
                    image=LAYER_RUNTIME.bundling_image,
                    command=["bash", "-c", docker_command],
                    local=PythonLocalBundling(source_path),
                ),
            ),
            compatible_runtimes=[LAYER_RUNTIME],
            description="Shared dependencies for the flight booking functions",
        )
