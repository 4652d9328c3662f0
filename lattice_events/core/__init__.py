"""
Core logic package.

Provides the wire codecs, payload marshaling, error taxonomy, configuration,
logging and the Lambda handler decorator. Import from the submodules; the
package root re-exports the public names.
"""
