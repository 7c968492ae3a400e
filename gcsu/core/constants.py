"""Module holding constants and message templates used across gcsu."""

DEFAULT_MODULE_PREFIX = "[Google Cloud Storage Plugin] "
GCS_SCHEME = "gs://"
GSUTIL_BIN = "gsutil"
PUBLIC_READ_ACL = "public-read"

# ---------- user-facing messages ----------
MSG_CLASSIC_DISPLAY_NAME = "Classic Upload"
MSG_NO_ARTIFACTS = "No artifacts found for pattern: {pattern}"
MSG_FOUND_FOR_PATTERN = "Found {count} files to upload from pattern: {pattern}"
MSG_EMPTY_GLOB = "Please specify a non-empty glob of files to upload"
MSG_BAD_GLOB_CHAR = "The glob contains an illegal character '{char}'. {suggest}"
MSG_DOLLAR_SUGGEST = "Check that all variable names ($VAR or ${VAR}) are spelled correctly."
MSG_INCLUDE_EXCEPTION = "Exception encountered while determining inclusions"
MSG_UNRESOLVED_VARIABLE = "Glob still contains an unresolved variable after substitution: {pattern}"
MSG_SKIP_ON_RESULT = "Skipping upload for build result {result} (upload for failed jobs is disabled)"
MSG_UPLOADING = "Uploading {count} file(s) to {destination}"
MSG_UPLOAD_FAILED = "Upload of {path} failed: {reason}"
MSG_GSUTIL_MISSING = "gsutil binary '{binary}' not found. Install the Google Cloud SDK."

# Sample values substituted for built-in build variables when a glob is
# validated before any build has run.
BUILTIN_SAMPLE_VARS = {
    "BUILD_NUMBER": "1",
    "BUILD_ID": "1",
    "BUILD_DISPLAY_NAME": "#1",
    "BUILD_TAG": "jenkins-job-1",
    "BUILD_URL": "http://localhost:8080/job/job/1/",
    "EXECUTOR_NUMBER": "0",
    "JOB_NAME": "job",
    "JOB_BASE_NAME": "job",
    "JOB_URL": "http://localhost:8080/job/job/",
    "JENKINS_URL": "http://localhost:8080/",
    "NODE_NAME": "built-in",
    "NODE_LABELS": "built-in",
    "WORKSPACE": "/workspace",
}

# Ant's default excludes, applied by the directory lister.
DEFAULT_EXCLUDES = (
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    "**/CVS",
    "**/CVS/**",
    "**/.cvsignore",
    "**/SCCS",
    "**/SCCS/**",
    "**/vssver.scc",
    "**/.svn",
    "**/.svn/**",
    "**/.DS_Store",
    "**/.git",
    "**/.git/**",
    "**/.gitattributes",
    "**/.gitignore",
    "**/.gitmodules",
    "**/.hg",
    "**/.hg/**",
    "**/.hgignore",
    "**/.hgsub",
    "**/.hgsubstate",
    "**/.hgtags",
    "**/.bzr",
    "**/.bzr/**",
    "**/.bzrignore",
    "**/_darcs",
    "**/_darcs/**",
    "**/.darcsrepo",
    "**/.darcsrepo/**",
    "**/-darcs-backup*",
    "**/.darcs-temp-mail",
)
