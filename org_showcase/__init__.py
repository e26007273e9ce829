"""Static site for an open-source org, built from live GitHub and Hex.pm data."""
