"""
Package Loader Signals

Django signals for package lifecycle events.
"""

from django.dispatch import Signal

package_loaded = Signal()       # A single package was loaded and instantiated
superpackage_loaded = Signal()  # A wildcard package finished expanding
package_rejected = Signal()     # A load was refused because the package is already loaded
package_unloaded = Signal()     # A caller released its package instance
