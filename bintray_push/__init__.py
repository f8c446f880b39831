"""Push build artifacts from Artifactory to Bintray."""
