from setuptools import setup, find_packages
import re


requirements = []

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

version = ''
with open('clientapp/utils.py') as f:
    version = re.search(r'^VERSION\s*=\s*[\'"]([^\'"]*)[\'"]', f.read(), re.MULTILINE).group(1)

if version.endswith(('a', 'b', 'rc')):
    try:
        import subprocess

        p = subprocess.Popen(['git', 'rev-list', '--count', 'HEAD'],
                             stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        out, err = p.communicate()
        if out:
            version += out.decode('utf-8').strip()
        p = subprocess.Popen(['git', 'rev-parse', '--short', 'HEAD'],
                             stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        out, err = p.communicate()
        if out:
            version += '+g' + out.decode('utf-8').strip()
    except Exception:
        pass

extras_require = {
    'test': [
        'pytest',
        'pytest-asyncio',
    ]
}

setup(name='clientapp.py',
      author='Teekeks',
      license='MIT',
      version=version,
      description='OAuth2 client application model for the Discord API',
      install_requires=requirements,
      extras_require=extras_require,
      python_requires='>=3.9.0',
      packages=find_packages(include=['clientapp', 'clientapp.*']))
