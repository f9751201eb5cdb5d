from .generate_bucket_name import generate_bucket_name
