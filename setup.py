import setuptools
import subprocess

# Change the following to represent your package:
pkg_name = 'dnman'
pkg_url = 'http://www.github.com/mrichar1/dnman'
pkg_license = 'AGPL 3'
pkg_description = "Build and edit LDAP distinguished names."
pkg_author = 'Matthew Richardson, Bruce Duncan'

# List of python module dependencies
# pip format: 'foo', 'foo==1.2', 'foo>=1.2' etc
install_requires = ['python-ldap', 'shellac']

extras_require = {'test': ['pytest']}

pkg_classifiers = [
    'Development Status :: 5 - Production/Stable',
    'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    ]


def call_git_describe():
    try:
        p = subprocess.Popen(['git', 'describe'],
                             stdout=subprocess.PIPE,
                             stderr=subprocess.DEVNULL)
        version = p.communicate()[0].decode().strip()
    except OSError:
        return None
    # Not a git checkout, or no tags yet
    if p.returncode != 0 or not version:
        return None
    return version


def read_release_version():
    try:
        with open("RELEASE-VERSION") as f:
            return f.readlines()[0].strip()
    except (IOError, IndexError):
        return None


def write_release_version(version):
    with open("RELEASE-VERSION", "w") as f:
        f.write("%s\n" % version)


def get_git_version():
    version = call_git_describe()
    release_version = read_release_version()
    if version is None:
        version = release_version

    if version is None:
        raise ValueError("Unable to determine the version number!")

    if version != release_version:
        write_release_version(version)

    return version


def main():

    setuptools.setup(
        name=pkg_name,
        version=get_git_version(),
        url=pkg_url,
        license=pkg_license,
        description=pkg_description,
        author=pkg_author,
        classifiers=pkg_classifiers,
        packages=setuptools.find_packages('src'),
        package_dir={'': 'src'},
        include_package_data=True,
        package_data={'dnman': ['dnman.conf']},
        python_requires='>=3.6',
        install_requires=install_requires,
        extras_require=extras_require,
        scripts=['src/bin/dnman'],
        )

if __name__ == "__main__":
    main()
