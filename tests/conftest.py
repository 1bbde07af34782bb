import os

# Lambda ハンドラーのモジュール読み込み時に Repository が生成されるため、先に設定する
os.environ.setdefault("TABLE_NAME", "test-flight-booking-table")
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-south-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "flight-booking-test")
