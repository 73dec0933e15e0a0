# s3kit

Request arguments for S3-compatible object storage. Each argument type checks
its input when it is built and, where a request needs them, produces the HTTP
headers to send.

It has no dependencies outside the standard library.

## What it does not do

s3kit performs no networking. It has no client, sends no requests and reads no
responses. It offers no command-line tool either. The argument objects,
headers and form fields it produces are for the HTTP client you already use.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

### Checking arguments

Argument types are dataclasses. The bucket name comes first, then the object
name where there is one. `extra_headers`, `extra_query_params` and `region`
are keyword-only. Input that is not valid raises a subclass of
`s3kit.errors.S3Error`, and every such subclass is also a `ValueError`.

```python
from s3kit.bucket_args import MakeBucketArgs
from s3kit.errors import InvalidBucketNameError

args = MakeBucketArgs("my-bucket", object_lock=True)

try:
    MakeBucketArgs("ab")
except InvalidBucketNameError as exc:
    print(exc)  # bucket name cannot be less than 3 characters
```

`s3kit.utils.check_bucket_name(name, strict)` performs the same check on its
own. It rejects names that are empty, shorter than 3 or longer than 63
characters, IP addresses, and names containing `..`, `.-` or `-.`. In strict
mode only lower-case letters, digits, `.` and `-` are allowed.

### Planning a multipart upload

```python
from s3kit.write_args import calc_part_info

part_size, part_count = calc_part_info(16 + 5 * 1024 * 1024, None)
# (5242880, 2)
```

When no part size is given, one is chosen for the object size: a multiple of
5 MiB, and never more than the object itself. When the object size is unknown
you must give a part size, and the part count comes back as `-1`. The limits
are those of S3: 5 MiB to 5 GiB per part, at most 10,000 parts, and at most
5 TiB per object. Breaking one raises `InvalidMinPartSizeError`,
`InvalidMaxPartSizeError`, `InvalidObjectSizeError`, `InvalidPartCountError`
or `MissingPartSizeError`.

`PutObjectArgs` runs this calculation when it is built:

```python
import io
from s3kit.write_args import PutObjectArgs

args = PutObjectArgs("my-bucket", "my-object", io.BytesIO(b"hello"), 5)
args.part_size, args.part_count  # (5, 1)
```

`UploadObjectArgs("my-bucket", "my-object", "photos.zip")` takes the object
size from the file on disk. If the path is not a regular file it raises
`OSError`.

### Write headers

Every write argument type (`PutObjectApiArgs`, `UploadPartArgs`,
`PutObjectArgs`, `CopyObjectArgs`, `ComposeObjectArgs`) accepts the
keyword-only fields `headers`, `user_metadata`, `sse`, `tags`, `retention` and
`legal_hold`. Its `get_headers()` method returns them combined into a
`Multimap`: tags go into `x-amz-tagging`, retention into
`x-amz-object-lock-mode` and `x-amz-object-lock-retain-until-date`, and a legal
hold into `x-amz-object-lock-legal-hold: ON`. The same function is available
as `build_write_headers(...)`.

### Conditional reads and copy sources

```python
from s3kit.read_args import ObjectConditionalReadArgs

src = ObjectConditionalReadArgs("my-bucket", "my-object", offset=3, length=5)
src.get_headers().get("Range")                    # "bytes=3-7"
src.get_copy_headers().get("x-amz-copy-source")   # "/my-bucket/my-object"
```

`GetObjectArgs`, `StatObjectArgs` and `CopySource` are aliases of this class.

`ComposeSource.build_headers(object_size, etag)` checks the source's offset
and length against the object size, raising `InvalidComposeSourceError` if
they do not fit. It then stores the copy-source headers and adds the etag as
`x-amz-copy-source-if-match` when no match etag was set. Once it has run, the
`object_size` and `headers` properties are available. Reading them earlier
raises `RuntimeError`.

### Presigned POST form data

```python
from datetime import timedelta

from s3kit.post_policy import PostPolicy
from s3kit.utils import utc_now

policy = PostPolicy("my-bucket", utc_now() + timedelta(days=5))
policy.add_equals_condition("key", "my-object")
policy.add_content_length_range_condition(1024 * 1024, 4 * 1024 * 1024)

form = policy.form_data("access-key-id", "secret", None, "us-east-1")
# keys: x-amz-algorithm, x-amz-credential, x-amz-date, policy, x-amz-signature
```

`form_data` requires a non-empty region and a `key` condition. If a session
token is passed, `x-amz-security-token` is added as well. The policy is signed
with AWS Signature V4 (`s3kit.utils.post_presign_v4`).

## Modules

- `s3kit.errors`: the exception types, all derived from `S3Error`
- `s3kit.utils`: `Multimap`, `merge`, `check_bucket_name`, `urlencode`, the date
  formatters (`to_iso8601utc`, `to_http_header_value`, `to_amz_date`,
  `to_signer_date`), `utc_now`, `b64encode` and `post_presign_v4`
- `s3kit.types`: `RetentionMode`, `Directive`, `Retention`, `Part` and the
  abstract `Sse`
- `s3kit.bucket_args`: `BucketArgs`, `MakeBucketArgs` and the `SetBucket*Args`
  types
- `s3kit.object_args`: object-level and multipart-control arguments
- `s3kit.read_args`: conditional read, copy, compose, select, download and
  presigned-URL arguments
- `s3kit.write_args`: write arguments, `build_write_headers` and
  `calc_part_info`
- `s3kit.post_policy`: `PostPolicy`