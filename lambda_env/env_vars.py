"""
Environment variable names understood by the Datadog Lambda extension and libraries.
"""

AWS_LAMBDA_EXEC_WRAPPER_KEY = "AWS_LAMBDA_EXEC_WRAPPER"
AWS_LAMBDA_EXEC_WRAPPER_VAL = "/opt/datadog_wrapper"

ENABLE_DD_TRACING_ENV_VAR = "DD_TRACE_ENABLED"
ENABLE_DD_ASM_ENV_VAR = "DD_SERVERLESS_APPSEC_ENABLED"
ENABLE_XRAY_TRACE_MERGING_ENV_VAR = "DD_MERGE_XRAY_TRACES"
INJECT_LOG_CONTEXT_ENV_VAR = "DD_LOGS_INJECTION"
LOG_LEVEL_ENV_VAR = "DD_LOG_LEVEL"
ENABLE_DD_LOGS_ENV_VAR = "DD_SERVERLESS_LOGS_ENABLED"
CAPTURE_LAMBDA_PAYLOAD_ENV_VAR = "DD_CAPTURE_LAMBDA_PAYLOAD"
DD_ENV_ENV_VAR = "DD_ENV"
DD_SERVICE_ENV_VAR = "DD_SERVICE"
DD_VERSION_ENV_VAR = "DD_VERSION"
DD_TAGS = "DD_TAGS"
DD_COLD_START_TRACING = "DD_COLD_START_TRACING"
DD_MIN_COLD_START_DURATION = "DD_MIN_COLD_START_DURATION"
DD_COLD_START_TRACE_SKIP_LIB = "DD_COLD_START_TRACE_SKIP_LIB"
DD_PROFILING_ENABLED = "DD_PROFILING_ENABLED"
DD_ENCODE_AUTHORIZER_CONTEXT = "DD_ENCODE_AUTHORIZER_CONTEXT"
DD_DECODE_AUTHORIZER_CONTEXT = "DD_DECODE_AUTHORIZER_CONTEXT"
DD_APM_FLUSH_DEADLINE_MILLISECONDS = "DD_APM_FLUSH_DEADLINE_MILLISECONDS"

GIT_COMMIT_SHA_TAG = "git.commit.sha"
