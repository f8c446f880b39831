"""Constants shared across the Push to Bintray module."""

MINIMAL_SUPPORTED_VERSION = "3.6"

# Sign method values that leave signing to the Bintray descriptor
SIGN_METHOD_DESCRIPTOR = ("", "descriptor")

MAVEN_CENTRAL_SYNC_CLOSE = "1"

MSG_START = "Starting Push to Bintray action."
MSG_UNSUPPORTED_VERSION = "Push to Bintray supported from Artifactory version " + MINIMAL_SUPPORTED_VERSION
MSG_VERSION_CHECK_ERROR = "Error while checking Artifactory version"
MSG_PUSH_EXCEPTION = "Push to Bintray Failed with Exception:"
MSG_SYNC_START = "Syncing build with Nexus."
MSG_SYNC_ERROR = "Error while trying to sync with Maven Central"
MSG_UNEXPECTED = "Error while trying to Push build to Bintray:"
